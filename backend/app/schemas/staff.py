"""
Staff Pydantic schemas for request/response validation.
"""

from datetime import datetime
from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from uuid import UUID

from app.schemas.common import UpdateSchema
from app.models.staff import StaffAvailability


class StaffBase(BaseModel):
    """Base staff schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)
    role: str = Field(..., min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: str = Field(..., min_length=1, max_length=50)
    availability: StaffAvailability = StaffAvailability.AVAILABLE
    skills: List[str] = []


class StaffCreate(StaffBase):
    """Schema for creating a staff member."""
    pass


class StaffUpdate(UpdateSchema):
    """Schema for updating a staff member (all fields optional)."""
    non_nullable = ("name", "role", "phone", "availability")

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    role: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1, max_length=50)
    availability: Optional[StaffAvailability] = None
    skills: Optional[List[str]] = None


class StaffResponse(StaffBase):
    """Schema for staff response."""
    id: UUID
    skills: Optional[List[str]] = None
    created_at: datetime

    class Config:
        from_attributes = True


class StaffListResponse(BaseModel):
    """Schema for staff list response."""
    items: List[StaffResponse]
    total: int
