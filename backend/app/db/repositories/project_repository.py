"""
Project repository for database operations.
"""

from typing import Optional, List
from uuid import UUID
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, or_

from app.db.repositories.base_repository import BaseRepository
from app.models.project import Project
from app.models.quote import Quote
from app.models.service_order import ServiceOrder
from app.models.invoice import Invoice


class ProjectRepository(BaseRepository[Project]):
    """Repository for project operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Project, session)

    async def has_dependents(self, project_id: UUID) -> bool:
        """True when quotes, service orders or invoices reference the project."""
        for model in (Quote, ServiceOrder, Invoice):
            result = await self.session.execute(
                select(func.count()).select_from(model).where(model.project_id == project_id)
            )
            if result.scalar_one() > 0:
                return True
        return False

    async def list_overlapping(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[Project]:
        """Projects whose start..due span touches the window; undated projects always match."""
        query = select(Project)
        if end is not None:
            query = query.where(or_(Project.start_date.is_(None), Project.start_date <= end))
        if start is not None:
            query = query.where(
                or_(
                    Project.due_date.is_(None),
                    Project.due_date >= start,
                )
            )
        result = await self.session.execute(query.order_by(Project.start_date))
        return list(result.scalars().all())
