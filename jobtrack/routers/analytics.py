"""API routes for dashboard analytics."""

from datetime import date
from typing import Any

from fastapi import APIRouter, Depends, Query

from jobtrack.core.exceptions import UpstreamFetchError, bad_gateway_exception
from jobtrack.schemas.analytics import (
    CalendarDay,
    ChartVariant,
    CohortRow,
    Dashboard,
    DateRange,
    SummaryMetrics,
)
from jobtrack.services.analytics_service import AnalyticsService, project_series
from jobtrack.services.dependencies import get_analytics_service, get_current_user_id

router = APIRouter(prefix="/analytics", tags=["analytics"])


def _reference_date(
    reference_date: date | None = Query(
        default=None, description="Day treated as today (YYYY-MM-DD)"
    ),
) -> date:
    """Only the HTTP layer reads the clock."""
    return reference_date or date.today()


@router.get("/range", response_model=DateRange | None)
async def get_date_range(
    today: date = Depends(_reference_date),
    user_id: str = Depends(get_current_user_id),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Analysis window from the first application to today; null without data."""
    try:
        return await service.date_range(user_id, today)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)


@router.get("/daily", response_model=list[dict[str, Any]])
async def get_daily_series(
    variant: ChartVariant = Query(default=ChartVariant.FULL),
    today: date = Depends(_reference_date),
    user_id: str = Depends(get_current_user_id),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Day-by-day metrics, optionally reduced to one chart's fields."""
    try:
        series = await service.daily_series(user_id, today)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)
    return project_series(series, variant)


@router.get("/summary", response_model=SummaryMetrics)
async def get_summary(
    today: date = Depends(_reference_date),
    user_id: str = Depends(get_current_user_id),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Whole-history totals, rates and response times."""
    try:
        return await service.summary(user_id, today)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)


@router.get("/companies", response_model=list[CohortRow])
async def get_companies(
    user_id: str = Depends(get_current_user_id),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Every company applied to, busiest first."""
    try:
        return await service.companies(user_id)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)


@router.get("/areas", response_model=list[CohortRow])
async def get_areas(
    limit: int | None = Query(default=None, ge=1, le=50),
    user_id: str = Depends(get_current_user_id),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Busiest areas of work."""
    try:
        return await service.areas(user_id, limit)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)


@router.get("/areas/best", response_model=list[CohortRow])
async def get_best_areas(
    limit: int = Query(default=3, ge=1, le=50),
    user_id: str = Depends(get_current_user_id),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Areas of work with the best success rate."""
    try:
        return await service.best_areas(user_id, limit)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)


@router.get("/calendar", response_model=list[CalendarDay])
async def get_calendar(
    year: int = Query(..., ge=1970, le=9999),
    month: int = Query(..., ge=1, le=12),
    user_id: str = Depends(get_current_user_id),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Applications per day of one calendar month."""
    try:
        return await service.calendar(user_id, year, month)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)


@router.get("/dashboard", response_model=Dashboard)
async def get_dashboard(
    today: date = Depends(_reference_date),
    user_id: str = Depends(get_current_user_id),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Every dashboard widget from a single fetch."""
    try:
        return await service.dashboard(user_id, today)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)
