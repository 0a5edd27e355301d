"""
Client repository for database operations.
"""

from typing import Dict, Optional, List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, or_

from app.db.repositories.base_repository import BaseRepository
from app.models.client import Client
from app.models.project import Project


class ClientRepository(BaseRepository[Client]):
    """Repository for client operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Client, session)

    def _search(self, query, search: Optional[str]):
        if search:
            pattern = f"%{search}%"
            query = query.where(or_(Client.name.ilike(pattern), Client.email.ilike(pattern)))
        return query

    async def list(
        self,
        skip: int = 0,
        limit: int = 100,
        search: Optional[str] = None,
        **filters,
    ) -> List[Client]:
        """List clients, optionally matching name or email."""
        query = self._search(self._apply_filters(select(Client), filters), search)
        query = query.order_by(Client.created_at.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count(self, search: Optional[str] = None, **filters) -> int:
        query = self._apply_filters(select(func.count()).select_from(Client), filters)
        result = await self.session.execute(self._search(query, search))
        return result.scalar_one()

    async def has_projects(self, client_id: UUID) -> bool:
        result = await self.session.execute(
            select(func.count()).select_from(Project).where(Project.client_id == client_id)
        )
        return result.scalar_one() > 0

    async def count_by_classification(self) -> Dict[str, int]:
        """Number of clients per classification."""
        result = await self.session.execute(
            select(Client.classification, func.count()).group_by(Client.classification)
        )
        return {classification.value: count for classification, count in result.all()}
