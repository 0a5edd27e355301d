"""
Subcontractor Pydantic schemas for request/response validation.
"""

from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from uuid import UUID

from app.schemas.common import UpdateSchema
from app.models.subcontractor import SubcontractorStatus, RateType


class SubcontractorBase(BaseModel):
    """Base subcontractor schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)
    company: Optional[str] = Field(None, max_length=255)
    specialty: str = Field(..., min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: str = Field(..., min_length=1, max_length=50)
    address: Optional[str] = Field(None, max_length=500)
    tax_id: Optional[str] = Field(None, max_length=50)
    insurance_info: Optional[str] = Field(None, max_length=500)
    rate: Optional[Decimal] = Field(None, ge=0)
    rate_type: RateType = RateType.HOURLY
    notes: Optional[str] = None
    status: SubcontractorStatus = SubcontractorStatus.ACTIVE


class SubcontractorCreate(SubcontractorBase):
    """Schema for creating a subcontractor."""
    pass


class SubcontractorUpdate(UpdateSchema):
    """Schema for updating a subcontractor (all fields optional)."""
    non_nullable = ("name", "specialty", "phone", "rate_type", "status")

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    company: Optional[str] = Field(None, max_length=255)
    specialty: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1, max_length=50)
    address: Optional[str] = Field(None, max_length=500)
    tax_id: Optional[str] = Field(None, max_length=50)
    insurance_info: Optional[str] = Field(None, max_length=500)
    rate: Optional[Decimal] = Field(None, ge=0)
    rate_type: Optional[RateType] = None
    notes: Optional[str] = None
    status: Optional[SubcontractorStatus] = None


class SubcontractorResponse(SubcontractorBase):
    """Schema for subcontractor response."""
    id: UUID
    created_at: datetime

    class Config:
        from_attributes = True


class SubcontractorListResponse(BaseModel):
    """Schema for subcontractor list response."""
    items: List[SubcontractorResponse]
    total: int
