"""
Supplier Pydantic schemas for request/response validation.
"""

from datetime import datetime
from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from uuid import UUID

from app.schemas.common import UpdateSchema


class SupplierBase(BaseModel):
    """Base supplier schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)
    contact_name: Optional[str] = Field(None, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, max_length=500)
    category: Optional[str] = Field(None, max_length=100)
    notes: Optional[str] = None


class SupplierCreate(SupplierBase):
    """Schema for creating a supplier."""
    pass


class SupplierUpdate(UpdateSchema):
    """Schema for updating a supplier (all fields optional)."""
    non_nullable = ("name",)

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    contact_name: Optional[str] = Field(None, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, max_length=500)
    category: Optional[str] = Field(None, max_length=100)
    notes: Optional[str] = None


class SupplierResponse(SupplierBase):
    """Schema for supplier response."""
    id: UUID
    created_at: datetime

    class Config:
        from_attributes = True


class SupplierListResponse(BaseModel):
    """Schema for supplier list response."""
    items: List[SupplierResponse]
    total: int
