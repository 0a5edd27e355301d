"""
Activity feed API endpoints.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.db.session import get_db
from app.controllers.activity_controller import ActivityController
from app.schemas.activity import ActivityCreate, ActivityResponse, ActivityListResponse

router = APIRouter()


@router.post("", response_model=ActivityResponse, status_code=status.HTTP_201_CREATED)
async def create_activity(
    activity_data: ActivityCreate,
    db: AsyncSession = Depends(get_db),
) -> ActivityResponse:
    """Add an entry to the activity feed."""
    controller = ActivityController(db)
    return await controller.create_activity(activity_data)


@router.get("", response_model=ActivityListResponse)
async def list_activities(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    project_id: UUID = Query(None),
    client_id: UUID = Query(None),
    db: AsyncSession = Depends(get_db),
) -> ActivityListResponse:
    """Recent activity, newest first."""
    controller = ActivityController(db)
    return await controller.list_activities(
        skip=skip,
        limit=limit,
        project_id=project_id,
        client_id=client_id,
    )
