"""Per-day and whole-history application metrics."""

import logging
from bisect import bisect_right
from collections import Counter
from collections.abc import Callable, Sequence
from datetime import date

from jobtrack.schemas.analytics import DailyMetrics, SummaryMetrics
from jobtrack.schemas.application import ApplicationStatus, JobApplication
from jobtrack.services.analytics.bucketing import group_by_application_date
from jobtrack.services.analytics.date_range import resolve_date_range
from jobtrack.utils.dates import days_between, round_half_up

logger = logging.getLogger(__name__)

LatencyFn = Callable[[JobApplication], int | None]

# Any of these ends the pending period of an application.
PENDING_MARKERS = (
    "first_response_date",
    "rejection_date",
    "offer_received_date",
    "withdrawal_date",
)


def response_time(record: JobApplication) -> int | None:
    """Days from sending the application to the first response."""
    return days_between(record.application_sent_date, record.first_response_date)


def interview_time(record: JobApplication) -> int | None:
    """Days from the first response to the scheduled interview."""
    return days_between(record.first_response_date, record.interview_scheduled_date)


def decision_time(record: JobApplication) -> int | None:
    """Days from the completed interview to the offer or rejection.

    The offer date wins when both outcomes are recorded.
    """
    outcome = record.offer_received_date or record.rejection_date
    return days_between(record.interview_completed_date, outcome)


def review_time(record: JobApplication) -> int | None:
    """Days from applying to the last status change, for reviewed applications."""
    if record.status == ApplicationStatus.APPLIED or record.updated_at is None:
        return None
    return days_between(record.application_date, record.updated_at.date())


def latency_samples(records: Sequence[JobApplication], metric: LatencyFn) -> list[int]:
    """Collect non-negative samples for records that have both endpoints."""
    samples = []
    discarded = 0
    for record in records:
        days = metric(record)
        if days is None:
            continue
        if days < 0:
            discarded += 1
            continue
        samples.append(days)

    if discarded:
        logger.debug(
            f"Discarded {discarded} negative {metric.__name__} samples "
            f"out of {len(records)} records"
        )
    return samples


def average_days(samples: Sequence[int]) -> int:
    """Mean rounded to whole days; 0 for an empty sample set."""
    if not samples:
        return 0
    return round_half_up(sum(samples) / len(samples))


def pending_interval(record: JobApplication) -> tuple[date, date | None] | None:
    """Half-open ``[start, end)`` span of days the application is pending.

    ``end`` is the earliest response or outcome marker, or None when the
    application is still open. Returns None when the record is never pending:
    its status moved past ``applied`` without any dated marker, or a marker
    predates the application itself.
    """
    markers = [
        getattr(record, field)
        for field in PENDING_MARKERS
        if getattr(record, field) is not None
    ]
    if not markers:
        if record.status != ApplicationStatus.APPLIED:
            return None
        return record.application_date, None

    end = min(markers)
    if end <= record.application_date:
        return None
    return record.application_date, end


def pending_counts(records: Sequence[JobApplication], days: Sequence[date]) -> list[int]:
    """Number of applications pending as of each of ``days``."""
    starts = []
    ends = []
    for record in records:
        interval = pending_interval(record)
        if interval is None:
            continue
        start, end = interval
        starts.append(start)
        if end is not None:
            ends.append(end)
    starts.sort()
    ends.sort()

    return [bisect_right(starts, day) - bisect_right(ends, day) for day in days]


def compute_daily_series(
    records: Sequence[JobApplication], days: Sequence[date]
) -> list[DailyMetrics]:
    """Compute the metrics of every day in ``days``.

    Status counts and latency averages cover the applications made on the
    day. Responses count every record whose first response arrived on the
    day, and the pending count is cumulative over the whole record set.
    """
    by_day = group_by_application_date(records)
    responses = Counter(
        record.first_response_date
        for record in records
        if record.first_response_date is not None
    )
    pending = pending_counts(records, days)

    series = []
    for day, pending_count in zip(days, pending):
        subset = by_day.get(day, [])
        statuses = Counter(record.status for record in subset)
        series.append(
            DailyMetrics(
                day=day,
                applications_count=len(subset),
                rejections_count=statuses[ApplicationStatus.REJECTED],
                interviews_count=statuses[ApplicationStatus.INTERVIEW],
                offers_count=statuses[ApplicationStatus.OFFER],
                responses_count=responses[day],
                pending_count=pending_count,
                avg_response_time=average_days(latency_samples(subset, response_time)),
                avg_interview_time=average_days(
                    latency_samples(subset, interview_time)
                ),
                avg_decision_time=average_days(latency_samples(subset, decision_time)),
                avg_review_time=average_days(latency_samples(subset, review_time)),
            )
        )
    return series


def compute_summary(
    records: Sequence[JobApplication], reference_date: date
) -> SummaryMetrics:
    """Whole-history statistics; an empty record set yields all zeros."""
    if not records:
        return SummaryMetrics()

    date_range = resolve_date_range(records, reference_date)
    statuses = Counter(record.status for record in records)
    total_applications = len(records)
    total_responses = sum(1 for r in records if r.first_response_date is not None)

    days_since_first = (reference_date - date_range.start).days
    applications_per_week = (
        round(total_applications / (days_since_first / 7), 1)
        if days_since_first > 0
        else 0.0
    )
    response_rate = (
        round(total_responses / total_applications * 100, 1)
        if total_applications > 0
        else 0.0
    )

    response_samples = latency_samples(records, response_time)

    return SummaryMetrics(
        total_applications=total_applications,
        total_rejections=statuses[ApplicationStatus.REJECTED],
        total_interviews=statuses[ApplicationStatus.INTERVIEW],
        total_offers=statuses[ApplicationStatus.OFFER],
        total_responses=total_responses,
        current_pending=pending_counts(records, [date_range.end])[0],
        applications_per_week=applications_per_week,
        response_rate=response_rate,
        avg_response_time=average_days(response_samples),
        avg_interview_time=average_days(latency_samples(records, interview_time)),
        avg_decision_time=average_days(latency_samples(records, decision_time)),
        fastest_response=min(response_samples) if response_samples else 0,
        slowest_response=max(response_samples) if response_samples else 0,
    )
