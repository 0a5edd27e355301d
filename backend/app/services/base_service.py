"""
Base service class.
Services hold the business rules for one area and own its unit of work:
every public mutation records its activity entry and commits before returning.
"""

from abc import ABC
from sqlalchemy.ext.asyncio import AsyncSession


class BaseService(ABC):
    """Base class for the domain services."""

    session: AsyncSession

    async def commit_and_refresh(self, *instances) -> None:
        """Commit the request's work and reload server-side values on instances."""
        await self.session.commit()
        for instance in instances:
            await self.session.refresh(instance)
