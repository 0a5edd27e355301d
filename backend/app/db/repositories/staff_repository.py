"""
Staff repository for database operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.base_repository import BaseRepository
from app.models.staff import Staff


class StaffRepository(BaseRepository[Staff]):
    """Repository for staff operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Staff, session)
