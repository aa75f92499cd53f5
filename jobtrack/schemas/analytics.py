"""Schemas for analytics results."""

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ChartVariant(str, Enum):
    """Projections of the daily series used by the dashboard charts."""

    FULL = "full"
    JOURNEY = "journey"
    FUNNEL = "funnel"
    PROCESS_TIMELINE = "process_timeline"


VARIANT_FIELDS: dict[ChartVariant, tuple[str, ...]] = {
    ChartVariant.JOURNEY: (
        "applications_count",
        "rejections_count",
        "avg_review_time",
    ),
    ChartVariant.FUNNEL: (
        "applications_count",
        "responses_count",
        "interviews_count",
        "offers_count",
        "rejections_count",
    ),
    ChartVariant.PROCESS_TIMELINE: (
        "avg_response_time",
        "avg_interview_time",
        "avg_decision_time",
        "applications_count",
        "pending_count",
    ),
}


class DateRange(BaseModel):
    """Inclusive analysis window."""

    start: date
    end: date


class DailyMetrics(BaseModel):
    """Metrics for one calendar day of the analysis window."""

    day: date
    applications_count: int = 0
    rejections_count: int = 0
    interviews_count: int = 0
    offers_count: int = 0
    responses_count: int = 0
    pending_count: int = 0
    avg_response_time: int = 0
    avg_interview_time: int = 0
    avg_decision_time: int = 0
    avg_review_time: int = 0

    def for_variant(self, variant: ChartVariant) -> dict[str, Any]:
        """Return the day plus the fields a chart variant plots."""
        if variant == ChartVariant.FULL:
            return self.model_dump()
        fields = {"day", *VARIANT_FIELDS[variant]}
        return self.model_dump(include=fields)


class SummaryMetrics(BaseModel):
    """Whole-history statistics."""

    total_applications: int = 0
    total_rejections: int = 0
    total_interviews: int = 0
    total_offers: int = 0
    total_responses: int = 0
    current_pending: int = 0
    applications_per_week: float = 0.0
    response_rate: float = 0.0
    avg_response_time: int = 0
    avg_interview_time: int = 0
    avg_decision_time: int = 0
    fastest_response: int = 0
    slowest_response: int = 0


class CohortRow(BaseModel):
    """Aggregate for every application sharing one category value."""

    key: str
    applications: int = 0
    interviews: int = 0
    offers: int = 0
    rejections: int = 0
    statuses: list[str] = Field(default_factory=list)
    sub_categories: list[str] = Field(default_factory=list)
    latest_application_date: date | None = None
    avg_response_time: int = 0
    avg_interview_time: int = 0
    success_rate: int = 0
    success_ratio: float = 0.0


class CalendarEntry(BaseModel):
    company_name: str
    position_title: str


class CalendarDay(BaseModel):
    """Applications made on one day of a calendar month."""

    day: date
    count: int
    applications: list[CalendarEntry] = Field(default_factory=list)


class Dashboard(BaseModel):
    """Everything the dashboard renders, computed from one snapshot."""

    date_range: DateRange | None
    daily: list[DailyMetrics]
    summary: SummaryMetrics
    companies: list[CohortRow]
    areas: list[CohortRow]
    incomplete_count: int
