"""
Calendar controller.
"""

from datetime import date
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.calendar_service import CalendarService
from app.schemas.calendar import CalendarEventListResponse


class CalendarController(BaseController):
    """Controller for calendar views."""

    def __init__(self, session: AsyncSession):
        self.calendar_service = CalendarService(session)

    async def list_events(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
        staff_ids: Optional[List[str]] = None,
        subcontractor_ids: Optional[List[str]] = None,
    ) -> CalendarEventListResponse:
        """Project and service order events inside the window."""
        events = await self.calendar_service.list_events(
            start=start,
            end=end,
            staff_ids=staff_ids,
            subcontractor_ids=subcontractor_ids,
        )
        return CalendarEventListResponse(items=events, total=len(events))
