"""
Service order Pydantic schemas for request/response validation.
"""

from datetime import date, datetime
from pydantic import BaseModel, Field
from typing import Optional, List
from uuid import UUID

from app.schemas.common import UpdateSchema
from app.models.service_order import ServiceOrderStatus, AssigneeType


class ServiceOrderBase(BaseModel):
    """Base service order schema with common fields."""
    details: str = Field(..., min_length=1)
    assigned_to: Optional[UUID] = None
    assigned_type: Optional[AssigneeType] = None
    supervisor_id: Optional[UUID] = None
    assigned_staff: List[UUID] = []
    assigned_subcontractors: List[UUID] = []
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    due_date: Optional[date] = None
    status: ServiceOrderStatus = ServiceOrderStatus.PENDING
    materials_required: Optional[str] = None
    special_instructions: Optional[str] = None
    safety_requirements: Optional[str] = None
    before_images: List[str] = []
    after_images: List[str] = []
    language: str = Field("english", max_length=20)


class ServiceOrderCreate(ServiceOrderBase):
    """Schema for creating a service order."""
    project_id: UUID
    quote_id: Optional[UUID] = None


class ServiceOrderUpdate(UpdateSchema):
    """Schema for updating a service order (signature is captured separately)."""
    non_nullable = ("details", "status", "language")

    details: Optional[str] = Field(None, min_length=1)
    assigned_to: Optional[UUID] = None
    assigned_type: Optional[AssigneeType] = None
    supervisor_id: Optional[UUID] = None
    assigned_staff: Optional[List[UUID]] = None
    assigned_subcontractors: Optional[List[UUID]] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    due_date: Optional[date] = None
    status: Optional[ServiceOrderStatus] = None
    materials_required: Optional[str] = None
    special_instructions: Optional[str] = None
    safety_requirements: Optional[str] = None
    before_images: Optional[List[str]] = None
    after_images: Optional[List[str]] = None
    language: Optional[str] = Field(None, max_length=20)


class ServiceOrderSignature(BaseModel):
    """Client signature, usually an image data URL."""
    signature: str = Field(..., min_length=1)


class ServiceOrderResponse(ServiceOrderBase):
    """Schema for service order response."""
    id: UUID
    project_id: UUID
    quote_id: Optional[UUID] = None
    assigned_staff: Optional[List[UUID]] = None
    assigned_subcontractors: Optional[List[UUID]] = None
    before_images: Optional[List[str]] = None
    after_images: Optional[List[str]] = None
    client_signature: Optional[str] = None
    signed_date: Optional[datetime] = None
    created_at: datetime

    class Config:
        from_attributes = True


class ServiceOrderListResponse(BaseModel):
    """Schema for service order list response."""
    items: List[ServiceOrderResponse]
    total: int
