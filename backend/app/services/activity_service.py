"""
Activity service.
Every mutation elsewhere records an entry here; the caller commits.
"""

import logging
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import BaseService
from app.db.repositories.activity_repository import ActivityRepository
from app.models.activity import Activity
from app.schemas.activity import ActivityCreate, ActivityResponse

logger = logging.getLogger(__name__)


class ActivityService(BaseService):
    """Service for the activity feed."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.activity_repo = ActivityRepository(session)

    async def record(
        self,
        type: str,
        description: str,
        project_id: Optional[UUID] = None,
        client_id: Optional[UUID] = None,
    ) -> Activity:
        """Append an entry without committing."""
        activity = await self.activity_repo.create(
            type=type,
            description=description,
            project_id=project_id,
            client_id=client_id,
        )
        logger.debug(f"Activity recorded: {type}", extra={"project_id": str(project_id) if project_id else None})
        return activity

    async def create_activity(self, activity_data: ActivityCreate) -> ActivityResponse:
        """Add a manual entry to the feed."""
        activity = await self.record(**activity_data.model_dump())
        await self.session.commit()
        return ActivityResponse.model_validate(activity)

    async def list_activities(
        self,
        skip: int = 0,
        limit: int = 100,
        project_id: Optional[UUID] = None,
        client_id: Optional[UUID] = None,
    ) -> tuple[List[ActivityResponse], int]:
        """List feed entries, newest first."""
        filters = {"project_id": project_id, "client_id": client_id}
        activities = await self.activity_repo.list(skip=skip, limit=limit, **filters)
        total = await self.activity_repo.count(**filters)
        return [ActivityResponse.model_validate(a) for a in activities], total
