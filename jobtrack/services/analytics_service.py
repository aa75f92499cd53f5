"""Analytics service: one repository fetch fanned out to the analytics engine."""

import logging
from datetime import date

from jobtrack.core.config import settings
from jobtrack.core.exceptions import EmptyInputError
from jobtrack.schemas.analytics import (
    CalendarDay,
    ChartVariant,
    CohortRow,
    Dashboard,
    DailyMetrics,
    DateRange,
    SummaryMetrics,
)
from jobtrack.schemas.application import JobApplication
from jobtrack.services.analytics import (
    area_of_work_breakdown,
    bucket_by_day,
    by_success_rate,
    calendar_month,
    company_showcase,
    compute_daily_series,
    compute_summary,
    find_incomplete,
    resolve_date_range,
    top_n,
)
from jobtrack.services.repository import ApplicationRepository

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Dashboard analytics for one user.

    Every method fetches the user's records once and derives everything
    from that snapshot; nothing is cached between calls.
    """

    def __init__(self, repository: ApplicationRepository):
        self.repository = repository

    async def _snapshot(self, user_id: str) -> list[JobApplication]:
        records = await self.repository.fetch_all(user_id)
        logger.debug(f"Loaded {len(records)} applications for user {user_id}")
        return records

    async def date_range(self, user_id: str, reference_date: date) -> DateRange | None:
        records = await self._snapshot(user_id)
        try:
            return resolve_date_range(records, reference_date)
        except EmptyInputError:
            return None

    async def daily_series(
        self, user_id: str, reference_date: date
    ) -> list[DailyMetrics]:
        return daily_series(await self._snapshot(user_id), reference_date)

    async def summary(self, user_id: str, reference_date: date) -> SummaryMetrics:
        return compute_summary(await self._snapshot(user_id), reference_date)

    async def companies(self, user_id: str) -> list[CohortRow]:
        return company_showcase(await self._snapshot(user_id))

    async def areas(self, user_id: str, limit: int | None = None) -> list[CohortRow]:
        return area_of_work_breakdown(
            await self._snapshot(user_id), limit or settings.area_chart_limit
        )

    async def best_areas(self, user_id: str, limit: int = 3) -> list[CohortRow]:
        """The charted areas of work ranked by success rate."""
        rows = area_of_work_breakdown(
            await self._snapshot(user_id), settings.area_chart_limit
        )
        return top_n(by_success_rate(rows), limit)

    async def calendar(self, user_id: str, year: int, month: int) -> list[CalendarDay]:
        return calendar_month(await self._snapshot(user_id), year, month)

    async def dashboard(self, user_id: str, reference_date: date) -> Dashboard:
        records = await self._snapshot(user_id)
        try:
            window = resolve_date_range(records, reference_date)
        except EmptyInputError:
            window = None

        return Dashboard(
            date_range=window,
            daily=daily_series(records, reference_date),
            summary=compute_summary(records, reference_date),
            companies=company_showcase(records),
            areas=area_of_work_breakdown(records, settings.area_chart_limit),
            incomplete_count=len(find_incomplete(records)),
        )


def daily_series(
    records: list[JobApplication], reference_date: date
) -> list[DailyMetrics]:
    """Daily metrics over the whole history; empty when there are no records."""
    try:
        window = resolve_date_range(records, reference_date)
    except EmptyInputError:
        return []
    return compute_daily_series(records, bucket_by_day(window))


def project_series(
    series: list[DailyMetrics], variant: ChartVariant
) -> list[dict]:
    """Reduce a series to the fields one chart plots."""
    return [day.for_variant(variant) for day in series]
