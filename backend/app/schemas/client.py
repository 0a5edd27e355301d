"""
Client Pydantic schemas for request/response validation.
"""

from datetime import datetime
from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from uuid import UUID

from app.schemas.common import UpdateSchema
from app.models.client import ClientClassification


class ClientBase(BaseModel):
    """Base client schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=50)
    address: str = Field(..., min_length=1, max_length=500)
    classification: ClientClassification = ClientClassification.RESIDENTIAL
    notes: Optional[str] = None


class ClientCreate(ClientBase):
    """Schema for creating a client."""
    pass


class ClientUpdate(UpdateSchema):
    """Schema for updating a client (all fields optional)."""
    non_nullable = ("name", "email", "phone", "address", "classification")

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1, max_length=50)
    address: Optional[str] = Field(None, min_length=1, max_length=500)
    classification: Optional[ClientClassification] = None
    notes: Optional[str] = None


class ClientResponse(ClientBase):
    """Schema for client response."""
    id: UUID
    created_at: datetime

    class Config:
        from_attributes = True


class ClientListResponse(BaseModel):
    """Schema for client list response."""
    items: List[ClientResponse]
    total: int
