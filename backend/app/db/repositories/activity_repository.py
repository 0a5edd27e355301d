"""
Activity repository for database operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.base_repository import BaseRepository
from app.models.activity import Activity


class ActivityRepository(BaseRepository[Activity]):
    """Repository for the append-only activity feed."""

    def __init__(self, session: AsyncSession):
        super().__init__(Activity, session)
