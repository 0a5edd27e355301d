"""
Invoice Pydantic schemas for request/response validation.
"""

from datetime import date, datetime
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional, List
from uuid import UUID

from app.schemas.common import UpdateSchema
from app.models.invoice import InvoiceStatus


class InvoiceBase(BaseModel):
    """Base invoice schema with common fields."""
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    total_amount: Decimal = Field(..., ge=0)
    amount_paid: Decimal = Field(Decimal("0"), ge=0)
    status: InvoiceStatus = InvoiceStatus.DRAFT
    notes: Optional[str] = Field(None, max_length=2000)


class InvoiceCreate(InvoiceBase):
    """Schema for creating an invoice. The invoice number is generated."""
    client_id: UUID
    project_id: UUID
    quote_id: Optional[UUID] = None


class InvoiceUpdate(UpdateSchema):
    """Schema for updating an invoice (all fields optional)."""
    non_nullable = ("total_amount", "amount_paid", "status")

    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    total_amount: Optional[Decimal] = Field(None, ge=0)
    amount_paid: Optional[Decimal] = Field(None, ge=0)
    status: Optional[InvoiceStatus] = None
    notes: Optional[str] = Field(None, max_length=2000)


class InvoiceResponse(InvoiceBase):
    """Schema for invoice response."""
    id: UUID
    invoice_number: str
    client_id: UUID
    project_id: UUID
    quote_id: Optional[UUID] = None
    payment_intent_id: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class InvoiceListResponse(BaseModel):
    """Schema for invoice list response."""
    items: List[InvoiceResponse]
    total: int


class PaymentIntentResponse(BaseModel):
    """What the browser needs to confirm a card payment."""
    invoice_id: UUID
    payment_intent_id: str
    client_secret: str
    amount: Decimal
    currency: str
