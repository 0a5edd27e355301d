"""
Report service.
Business summary over a look-back window, read through the app cache.
"""

import calendar
import logging
from collections import defaultdict
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.cache import AppCache, REPORTS
from app.services.base_service import BaseService
from app.db.repositories.client_repository import ClientRepository
from app.db.repositories.project_repository import ProjectRepository
from app.db.repositories.quote_repository import QuoteRepository
from app.models.client import ClientClassification
from app.models.project import ProjectStatus
from app.models.quote import QuoteStatus
from app.schemas.report import (
    ReportRange, ReportSummaryResponse, MonthlyPoint, ClientDistribution,
)
from app.utils.quote_calculator import round2

logger = logging.getLogger(__name__)

RANGE_MONTHS = {
    ReportRange.LAST_MONTH: 1,
    ReportRange.LAST_3_MONTHS: 3,
    ReportRange.LAST_6_MONTHS: 6,
    ReportRange.LAST_YEAR: 12,
}

WON_STATUSES = (QuoteStatus.APPROVED, QuoteStatus.CONVERTED)


def subtract_months(day: date, months: int) -> date:
    """Same day-of-month `months` earlier, clamped to the month's length."""
    month_index = day.year * 12 + day.month - 1 - months
    year, month = divmod(month_index, 12)
    month += 1
    return date(year, month, min(day.day, calendar.monthrange(year, month)[1]))


def month_key(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


class ReportService(BaseService):
    """Service for reporting."""

    def __init__(self, session: AsyncSession, cache: Optional[AppCache] = None):
        from app.deps.di_container import get_container

        self.session = session
        self.client_repo = ClientRepository(session)
        self.project_repo = ProjectRepository(session)
        self.quote_repo = QuoteRepository(session)
        self.cache = cache or get_container().app_cache()

    async def get_summary(
        self,
        report_range: ReportRange = ReportRange.LAST_6_MONTHS,
        today: Optional[date] = None,
    ) -> ReportSummaryResponse:
        """Summary for the window ending today, cached until the next mutation."""
        # Timestamps are stored in UTC
        today = today or datetime.now(timezone.utc).date()
        return await self.cache.get_or_set(
            REPORTS,
            (report_range, today),
            lambda: self._build_summary(report_range, today),
        )

    async def _build_summary(self, report_range: ReportRange, today: date) -> ReportSummaryResponse:
        months = RANGE_MONTHS[report_range]
        start = subtract_months(today, months)
        window_start = datetime.combine(start, time.min)
        window_end = datetime.combine(today + timedelta(days=1), time.min)

        clients = await self.client_repo.list_created_between(window_start, window_end)
        projects = await self.project_repo.list_created_between(window_start, window_end)
        quotes = await self.quote_repo.list_created_between(window_start, window_end)

        completed = [p for p in projects if p.status == ProjectStatus.COMPLETED]
        won = [q for q in quotes if q.status in WON_STATUSES]
        total_revenue = sum((Decimal(q.total_estimate) for q in won), Decimal("0"))
        conversion_rate = round(len(won) / len(quotes) * 100, 1) if quotes else 0.0
        average_value = round2(total_revenue / len(completed)) if completed else Decimal("0.00")

        monthly = await self._monthly_series(today, months, window_end)
        distribution = await self.client_repo.count_by_classification()

        logger.info(
            "Report summary built",
            extra={"range": report_range.value, "quotes": len(quotes), "clients": len(clients)},
        )
        return ReportSummaryResponse(
            range=report_range,
            start_date=start,
            end_date=today,
            new_clients=len(clients),
            completed_projects=len(completed),
            total_revenue=round2(total_revenue),
            conversion_rate=conversion_rate,
            average_project_value=average_value,
            monthly=monthly,
            client_distribution=[
                ClientDistribution(classification=c.value, count=distribution.get(c.value, 0))
                for c in ClientClassification
            ],
        )

    async def _monthly_series(self, today: date, months: int, window_end: datetime) -> list:
        """Revenue by approval month and quote count by creation month, oldest first."""
        first_month = subtract_months(today.replace(day=1), months - 1)
        revenue = defaultdict(lambda: Decimal("0"))
        counts = defaultdict(int)

        for quote in await self.quote_repo.list_won_since(first_month):
            revenue[month_key(quote.approved_date)] += Decimal(quote.total_estimate)
        created = await self.quote_repo.list_created_between(
            datetime.combine(first_month, time.min), window_end
        )
        for quote in created:
            counts[month_key(quote.created_at.date())] += 1

        series = []
        for offset in range(months - 1, -1, -1):
            key = month_key(subtract_months(today.replace(day=1), offset))
            series.append(MonthlyPoint(month=key, revenue=round2(revenue[key]), quotes=counts[key]))
        return series
