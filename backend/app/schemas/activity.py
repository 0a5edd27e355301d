"""
Activity feed schemas.
"""

from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional, List
from uuid import UUID


class ActivityCreate(BaseModel):
    """Schema for a manual activity entry."""
    type: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=1000)
    project_id: Optional[UUID] = None
    client_id: Optional[UUID] = None


class ActivityResponse(ActivityCreate):
    """Schema for activity response."""
    id: UUID
    created_at: datetime

    class Config:
        from_attributes = True


class ActivityListResponse(BaseModel):
    """Schema for activity list response."""
    items: List[ActivityResponse]
    total: int
