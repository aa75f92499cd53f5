"""Expansion of a date range into calendar-day buckets."""

import calendar
from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from jobtrack.schemas.analytics import CalendarDay, CalendarEntry, DateRange
from jobtrack.schemas.application import JobApplication


def bucket_by_day(date_range: DateRange) -> list[date]:
    """Every calendar day from ``start`` to ``end`` inclusive."""
    span = (date_range.end - date_range.start).days
    return [date_range.start + timedelta(days=offset) for offset in range(span + 1)]


def records_on_day(records: Iterable[JobApplication], day: date) -> list[JobApplication]:
    """Records whose application date is exactly ``day``."""
    return [record for record in records if record.application_date == day]


def group_by_application_date(
    records: Iterable[JobApplication],
) -> dict[date, list[JobApplication]]:
    """Index records by application date, keeping input order per day."""
    by_day: dict[date, list[JobApplication]] = {}
    for record in records:
        by_day.setdefault(record.application_date, []).append(record)
    return by_day


def calendar_month(
    records: Sequence[JobApplication], year: int, month: int
) -> list[CalendarDay]:
    """Per-day application counts for one calendar month."""
    days_in_month = calendar.monthrange(year, month)[1]
    window = DateRange(
        start=date(year, month, 1), end=date(year, month, days_in_month)
    )
    by_day = group_by_application_date(records)

    result = []
    for day in bucket_by_day(window):
        applied = by_day.get(day, [])
        result.append(
            CalendarDay(
                day=day,
                count=len(applied),
                applications=[
                    CalendarEntry(
                        company_name=record.company_name,
                        position_title=record.position_title,
                    )
                    for record in applied
                ],
            )
        )
    return result
