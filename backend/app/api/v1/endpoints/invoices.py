"""
Invoice API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.db.session import get_db
from app.controllers.invoice_controller import InvoiceController
from app.models.invoice import InvoiceStatus
from app.schemas.invoice import (
    InvoiceCreate,
    InvoiceUpdate,
    InvoiceResponse,
    InvoiceListResponse,
    PaymentIntentResponse,
)

router = APIRouter()


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_invoice(
    invoice_data: InvoiceCreate,
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Create a new invoice."""
    controller = InvoiceController(db)
    try:
        return await controller.create_invoice(invoice_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    status: InvoiceStatus = Query(None),
    client_id: UUID = Query(None),
    project_id: UUID = Query(None),
    db: AsyncSession = Depends(get_db),
) -> InvoiceListResponse:
    """List invoices with optional filters."""
    controller = InvoiceController(db)
    return await controller.list_invoices(
        skip=skip,
        limit=limit,
        status=status,
        client_id=client_id,
        project_id=project_id,
    )


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(
    invoice_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Get invoice by ID."""
    controller = InvoiceController(db)
    invoice = await controller.get_invoice(invoice_id)
    if not invoice:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invoice not found",
        )
    return invoice


@router.put("/{invoice_id}", response_model=InvoiceResponse)
async def update_invoice(
    invoice_id: UUID,
    invoice_data: InvoiceUpdate,
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Update an invoice."""
    controller = InvoiceController(db)
    try:
        invoice = await controller.update_invoice(invoice_id, invoice_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not invoice:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invoice not found",
        )
    return invoice


@router.post("/{invoice_id}/payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    invoice_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> PaymentIntentResponse:
    """Start an online card payment for the outstanding balance."""
    controller = InvoiceController(db)
    try:
        intent = await controller.create_payment_intent(invoice_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not intent:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invoice not found",
        )
    return intent


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(
    invoice_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete an invoice."""
    controller = InvoiceController(db)
    deleted = await controller.delete_invoice(invoice_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invoice not found",
        )
