"""
Quote repository for database operations.
"""

from datetime import date
from typing import Optional, List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload

from app.db.repositories.base_repository import BaseRepository
from app.models.quote import Quote


class QuoteRepository(BaseRepository[Quote]):
    """Repository for quote operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Quote, session)

    async def get_with_project(self, id: UUID) -> Optional[Quote]:
        """Get quote with its project and the project's client."""
        from app.models.project import Project

        result = await self.session.execute(
            select(Quote)
            .options(selectinload(Quote.project).selectinload(Project.client))
            .where(Quote.id == id)
        )
        return result.scalar_one_or_none()

    async def get_latest_for_project(self, project_id: UUID) -> Optional[Quote]:
        """Most recent quote for a project."""
        result = await self.session.execute(
            select(Quote)
            .where(Quote.project_id == project_id)
            .order_by(Quote.created_at.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def is_referenced(self, quote_id: UUID) -> bool:
        """True when a service order or invoice points at the quote."""
        from app.models.service_order import ServiceOrder
        from app.models.invoice import Invoice

        for model in (ServiceOrder, Invoice):
            result = await self.session.execute(
                select(func.count()).select_from(model).where(model.quote_id == quote_id)
            )
            if result.scalar_one() > 0:
                return True
        return False

    async def list_won_since(self, start: date) -> List[Quote]:
        """Approved or converted quotes with an approval date on or after start."""
        from app.models.quote import QuoteStatus

        result = await self.session.execute(
            select(Quote).where(
                Quote.status.in_([QuoteStatus.APPROVED, QuoteStatus.CONVERTED]),
                Quote.approved_date >= start,
            )
        )
        return list(result.scalars().all())
