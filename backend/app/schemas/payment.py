"""
Payment Pydantic schemas for request/response validation.
"""

import datetime as dt
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional, List
from uuid import UUID

from app.schemas.common import UpdateSchema
from app.models.payment import PaymentStatus, PaymentMethod, RecipientType


class PaymentBase(BaseModel):
    """Base payment schema with common fields."""
    recipient_type: RecipientType
    recipient_id: UUID
    amount: Decimal = Field(..., gt=0)
    date: dt.date
    method: PaymentMethod
    status: PaymentStatus = PaymentStatus.PENDING
    description: Optional[str] = Field(None, max_length=1000)
    reference: Optional[str] = Field(None, max_length=255)
    project_id: Optional[UUID] = None
    purchase_order_id: Optional[UUID] = None


class PaymentCreate(PaymentBase):
    """Schema for creating a payment."""
    pass


class PaymentUpdate(UpdateSchema):
    """Schema for updating a payment (all fields optional)."""
    non_nullable = ("amount", "date", "method", "status")

    amount: Optional[Decimal] = Field(None, gt=0)
    date: Optional[dt.date] = None
    method: Optional[PaymentMethod] = None
    status: Optional[PaymentStatus] = None
    description: Optional[str] = Field(None, max_length=1000)
    reference: Optional[str] = Field(None, max_length=255)
    project_id: Optional[UUID] = None
    purchase_order_id: Optional[UUID] = None


class PaymentResponse(PaymentBase):
    """Schema for payment response."""
    id: UUID
    created_at: dt.datetime

    class Config:
        from_attributes = True


class PaymentListResponse(BaseModel):
    """Schema for payment list response."""
    items: List[PaymentResponse]
    total: int
