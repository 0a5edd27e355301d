"""
Activity feed controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.activity_service import ActivityService
from app.schemas.activity import ActivityCreate, ActivityResponse, ActivityListResponse


class ActivityController(BaseController):
    """Controller for the activity feed."""

    def __init__(self, session: AsyncSession):
        self.activity_service = ActivityService(session)

    async def create_activity(self, activity_data: ActivityCreate) -> ActivityResponse:
        return await self.activity_service.create_activity(activity_data)

    async def list_activities(
        self,
        skip: int = 0,
        limit: int = 100,
        project_id: Optional[UUID] = None,
        client_id: Optional[UUID] = None,
    ) -> ActivityListResponse:
        """Newest activities first."""
        activities, total = await self.activity_service.list_activities(
            skip=skip,
            limit=limit,
            project_id=project_id,
            client_id=client_id,
        )
        return ActivityListResponse(items=activities, total=total)
