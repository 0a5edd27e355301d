"""
Service order repository for database operations.
"""

from datetime import date
from typing import Optional, List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_
from sqlalchemy.orm import selectinload

from app.db.repositories.base_repository import BaseRepository
from app.models.service_order import ServiceOrder


class ServiceOrderRepository(BaseRepository[ServiceOrder]):
    """Repository for service order operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(ServiceOrder, session)

    async def get_with_project(self, id: UUID) -> Optional[ServiceOrder]:
        """Get service order with project and client loaded, for documents."""
        from app.models.project import Project

        result = await self.session.execute(
            select(ServiceOrder)
            .options(selectinload(ServiceOrder.project).selectinload(Project.client))
            .where(ServiceOrder.id == id)
        )
        return result.scalar_one_or_none()

    async def list_scheduled(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[ServiceOrder]:
        """Service orders (with project) that fall inside the window."""
        query = select(ServiceOrder).options(selectinload(ServiceOrder.project))
        if end is not None:
            query = query.where(or_(ServiceOrder.start_date.is_(None), ServiceOrder.start_date <= end))
        if start is not None:
            query = query.where(
                or_(
                    ServiceOrder.end_date.is_(None),
                    ServiceOrder.end_date >= start,
                )
            )
        result = await self.session.execute(query.order_by(ServiceOrder.start_date))
        return list(result.scalars().all())
