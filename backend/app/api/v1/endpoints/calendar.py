"""
Calendar API endpoints.
"""

from datetime import date
from typing import List
from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.controllers.calendar_controller import CalendarController
from app.schemas.calendar import CalendarEventListResponse

router = APIRouter()


@router.get("/events", response_model=CalendarEventListResponse)
async def list_calendar_events(
    start: date = Query(None),
    end: date = Query(None),
    staff_ids: List[str] = Query(None),
    subcontractor_ids: List[str] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> CalendarEventListResponse:
    """Project and service order events, optionally filtered by assignee."""
    controller = CalendarController(db)
    try:
        return await controller.list_events(
            start=start,
            end=end,
            staff_ids=staff_ids,
            subcontractor_ids=subcontractor_ids,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
