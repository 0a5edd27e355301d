"""
Calendar feed schemas.
"""

from datetime import date
from pydantic import BaseModel
from typing import Literal, Optional, List
from uuid import UUID


class CalendarEvent(BaseModel):
    """A project or service order placed on the calendar."""
    id: str
    title: str
    start: date
    end: Optional[date] = None
    all_day: bool = True
    color: str
    type: Literal["project", "service_order"]
    project_id: UUID
    status: str
    staff_ids: List[str] = []
    subcontractor_ids: List[str] = []


class CalendarEventListResponse(BaseModel):
    """Schema for calendar event list response."""
    items: List[CalendarEvent]
    total: int
