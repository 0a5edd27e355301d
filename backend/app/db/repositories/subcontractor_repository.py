"""
Subcontractor repository for database operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.base_repository import BaseRepository
from app.models.subcontractor import Subcontractor


class SubcontractorRepository(BaseRepository[Subcontractor]):
    """Repository for subcontractor operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Subcontractor, session)
