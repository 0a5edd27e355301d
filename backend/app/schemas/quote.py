"""
Quote Pydantic schemas for request/response validation.
"""

from datetime import date, datetime
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Literal, Optional, List
from uuid import UUID

from app.schemas.common import UpdateSchema
from app.models.quote import QuoteStatus
from app.models.service_order import AssigneeType
from app.utils.line_items import MaterialItem, LaborItem

OptionalService = Literal["prep", "primer", "protection", "cleanup", "warranty"]


class QuotePricing(BaseModel):
    """Fields that drive the calculated total."""
    materials_estimate: List[MaterialItem] = []
    labor_estimate: List[LaborItem] = []
    profit_margin: Decimal = Field(Decimal("0"), ge=0, le=100, decimal_places=2)
    additional_costs: Decimal = Field(Decimal("0"), ge=0, decimal_places=2)
    optional_services: List[OptionalService] = []


class QuoteCreate(QuotePricing):
    """
    Schema for creating a quote.

    New quotes always start as drafts; total_estimate is computed server-side.
    """
    project_id: UUID
    scope_of_work: str = ""
    valid_until: Optional[date] = None
    notes: Optional[str] = Field(None, max_length=2000)


class QuoteUpdate(UpdateSchema):
    """Schema for updating a quote (all fields optional)."""
    non_nullable = (
        "materials_estimate", "labor_estimate", "profit_margin", "additional_costs",
        "optional_services", "scope_of_work",
    )

    materials_estimate: Optional[List[MaterialItem]] = None
    labor_estimate: Optional[List[LaborItem]] = None
    profit_margin: Optional[Decimal] = Field(None, ge=0, le=100, decimal_places=2)
    additional_costs: Optional[Decimal] = Field(None, ge=0, decimal_places=2)
    optional_services: Optional[List[OptionalService]] = None
    scope_of_work: Optional[str] = None
    valid_until: Optional[date] = None
    notes: Optional[str] = Field(None, max_length=2000)


class QuoteResponse(BaseModel):
    """Schema for quote response."""
    id: UUID
    project_id: UUID
    materials_estimate: List[MaterialItem]
    labor_estimate: List[LaborItem]
    profit_margin: Decimal
    additional_costs: Decimal
    total_estimate: Decimal
    scope_of_work: str
    optional_services: List[str]
    status: QuoteStatus
    sent_date: Optional[date] = None
    valid_until: Optional[date] = None
    approved_date: Optional[date] = None
    rejected_date: Optional[date] = None
    notes: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class QuoteListResponse(BaseModel):
    """Schema for quote list response."""
    items: List[QuoteResponse]
    total: int


class QuoteCalculationRequest(QuotePricing):
    """Preview a calculation without saving anything."""
    scope_of_work: Optional[str] = None


class CalculatedLineResponse(BaseModel):
    kind: str
    label: str
    enabled: bool
    line_total: Decimal

    class Config:
        from_attributes = True


class QuoteCalculationResponse(BaseModel):
    """Calculated totals and breakdown text."""
    lines: List[CalculatedLineResponse]
    materials_subtotal: Decimal
    labor_subtotal: Decimal
    base_subtotal: Decimal
    additional_costs: Decimal
    profit_margin: Decimal
    profit_amount: Decimal
    total_estimate: Decimal
    breakdown: str
    scope_of_work: Optional[str] = None
    warnings: List[str] = []


class QuoteStatusUpdate(BaseModel):
    """Move a quote through its lifecycle."""
    status: QuoteStatus


class QuoteConvertRequest(BaseModel):
    """Optional assignment for the service order created from a quote."""
    assigned_to: Optional[UUID] = None
    assigned_type: Optional[AssigneeType] = None
    supervisor_id: Optional[UUID] = None
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    language: str = "english"
