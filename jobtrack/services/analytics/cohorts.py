"""Grouping of applications by a categorical dimension."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import date

from jobtrack.schemas.analytics import CohortRow
from jobtrack.schemas.application import ApplicationStatus, JobApplication
from jobtrack.services.analytics.metrics import (
    average_days,
    interview_time,
    latency_samples,
    response_time,
)
from jobtrack.utils.dates import round_half_up

KeyFn = Callable[[JobApplication], str | None]

AREA_FALLBACK = "Other"


@dataclass
class _Cohort:
    """Accumulator for one group while folding the record set."""

    key: str
    records: list[JobApplication] = field(default_factory=list)
    statuses: list[str] = field(default_factory=list)
    sub_categories: list[str] = field(default_factory=list)
    latest_application_date: date | None = None

    def add(self, record: JobApplication, sub_key: str | None) -> None:
        self.records.append(record)

        status = ApplicationStatus(record.status).value
        if status not in self.statuses:
            self.statuses.append(status)

        if sub_key and sub_key not in self.sub_categories:
            self.sub_categories.append(sub_key)

        if (
            self.latest_application_date is None
            or record.application_date > self.latest_application_date
        ):
            self.latest_application_date = record.application_date

    def to_row(self) -> CohortRow:
        applications = len(self.records)
        interviews = self._count(ApplicationStatus.INTERVIEW)
        offers = self._count(ApplicationStatus.OFFER)
        success_ratio = (
            (interviews + offers) / applications * 100 if applications > 0 else 0.0
        )
        return CohortRow(
            key=self.key,
            applications=applications,
            interviews=interviews,
            offers=offers,
            rejections=self._count(ApplicationStatus.REJECTED),
            statuses=list(self.statuses),
            sub_categories=list(self.sub_categories),
            latest_application_date=self.latest_application_date,
            avg_response_time=average_days(
                latency_samples(self.records, response_time)
            ),
            avg_interview_time=average_days(
                latency_samples(self.records, interview_time)
            ),
            success_rate=round_half_up(success_ratio),
            success_ratio=success_ratio,
        )

    def _count(self, status: ApplicationStatus) -> int:
        return sum(1 for record in self.records if record.status == status)


def group_by_category(
    records: Sequence[JobApplication],
    key_fn: KeyFn,
    fallback: str | None = None,
    sub_key_fn: KeyFn | None = None,
) -> list[CohortRow]:
    """Fold records into one row per distinct key, in first-seen order.

    Records with an empty key use ``fallback``; without a fallback they are
    left out of every group.
    """
    cohorts: dict[str, _Cohort] = {}
    for record in records:
        key = key_fn(record) or fallback
        if not key:
            continue
        if key not in cohorts:
            cohorts[key] = _Cohort(key=key)
        sub_key = sub_key_fn(record) if sub_key_fn else None
        cohorts[key].add(record, sub_key)

    return [cohort.to_row() for cohort in cohorts.values()]


def by_count(rows: Sequence[CohortRow]) -> list[CohortRow]:
    """Most applications first; ties keep their incoming order."""
    return sorted(rows, key=lambda row: row.applications, reverse=True)


def by_success_rate(rows: Sequence[CohortRow]) -> list[CohortRow]:
    """Highest unrounded success rate first; ties keep their incoming order."""
    return sorted(rows, key=lambda row: row.success_ratio, reverse=True)


def top_n(rows: Sequence[CohortRow], n: int) -> list[CohortRow]:
    return list(rows[:n])


def company_showcase(records: Sequence[JobApplication]) -> list[CohortRow]:
    """Every company with the areas of work applied to there."""
    rows = group_by_category(
        records,
        key_fn=lambda record: record.company_name,
        sub_key_fn=lambda record: record.area_of_work,
    )
    return by_count(rows)


def area_of_work_breakdown(
    records: Sequence[JobApplication], limit: int = 8
) -> list[CohortRow]:
    """The ``limit`` busiest areas of work; the rest are dropped."""
    rows = group_by_category(
        records,
        key_fn=lambda record: record.area_of_work,
        fallback=AREA_FALLBACK,
        sub_key_fn=lambda record: record.company_name,
    )
    return top_n(by_count(rows), limit)
