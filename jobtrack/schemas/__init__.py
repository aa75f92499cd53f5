"""Pydantic schemas for request/response validation."""

from jobtrack.schemas.analytics import (
    CohortRow,
    DailyMetrics,
    DateRange,
    SummaryMetrics,
)
from jobtrack.schemas.application import (
    ApplicationStatus,
    JobApplication,
    JobApplicationCreate,
    JobApplicationUpdate,
)

__all__ = [
    "ApplicationStatus",
    "CohortRow",
    "DailyMetrics",
    "DateRange",
    "JobApplication",
    "JobApplicationCreate",
    "JobApplicationUpdate",
    "SummaryMetrics",
]
