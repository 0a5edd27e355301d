"""
Purchase order Pydantic schemas for request/response validation.
"""

from datetime import date, datetime
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional, List
from uuid import UUID

from app.schemas.common import UpdateSchema
from app.models.purchase_order import PurchaseOrderStatus


class PurchaseOrderBase(BaseModel):
    """Base purchase order schema with common fields."""
    order_date: date
    total_amount: Decimal = Field(..., ge=0)
    status: PurchaseOrderStatus = PurchaseOrderStatus.DRAFT
    notes: Optional[str] = Field(None, max_length=2000)


class PurchaseOrderCreate(PurchaseOrderBase):
    """Schema for creating a purchase order. A number is generated when omitted."""
    supplier_id: UUID
    project_id: Optional[UUID] = None
    order_number: Optional[str] = Field(None, min_length=1, max_length=50)


class PurchaseOrderUpdate(UpdateSchema):
    """Schema for updating a purchase order (all fields optional)."""
    non_nullable = ("order_date", "total_amount", "status")

    project_id: Optional[UUID] = None
    order_date: Optional[date] = None
    total_amount: Optional[Decimal] = Field(None, ge=0)
    status: Optional[PurchaseOrderStatus] = None
    notes: Optional[str] = Field(None, max_length=2000)


class PurchaseOrderResponse(PurchaseOrderBase):
    """Schema for purchase order response."""
    id: UUID
    supplier_id: UUID
    project_id: Optional[UUID] = None
    order_number: str
    created_at: datetime

    class Config:
        from_attributes = True


class PurchaseOrderListResponse(BaseModel):
    """Schema for purchase order list response."""
    items: List[PurchaseOrderResponse]
    total: int
