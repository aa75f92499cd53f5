"""Timeline and cohort analytics over job application records.

Every function here is pure: it reads a snapshot list of records and never
touches storage or the system clock.
"""

from jobtrack.services.analytics.bucketing import (
    bucket_by_day,
    calendar_month,
    records_on_day,
)
from jobtrack.services.analytics.cohorts import (
    area_of_work_breakdown,
    by_count,
    by_success_rate,
    company_showcase,
    group_by_category,
    top_n,
)
from jobtrack.services.analytics.date_range import resolve_date_range
from jobtrack.services.analytics.metrics import (
    compute_daily_series,
    compute_summary,
)
from jobtrack.services.analytics.missing_data import (
    find_incomplete,
    missing_fields,
    next_incomplete,
)

__all__ = [
    "area_of_work_breakdown",
    "bucket_by_day",
    "by_count",
    "by_success_rate",
    "calendar_month",
    "company_showcase",
    "compute_daily_series",
    "compute_summary",
    "find_incomplete",
    "group_by_category",
    "missing_fields",
    "next_incomplete",
    "records_on_day",
    "resolve_date_range",
    "top_n",
]
