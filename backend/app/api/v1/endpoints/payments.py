"""
Payment API endpoints.
Outgoing payments to staff, subcontractors and suppliers.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.db.session import get_db
from app.controllers.payment_controller import PaymentController
from app.models.payment import PaymentStatus, RecipientType
from app.schemas.payment import (
    PaymentCreate,
    PaymentUpdate,
    PaymentResponse,
    PaymentListResponse,
)

router = APIRouter()


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(
    payment_data: PaymentCreate,
    db: AsyncSession = Depends(get_db),
) -> PaymentResponse:
    """Record a payment."""
    controller = PaymentController(db)
    try:
        return await controller.create_payment(payment_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("", response_model=PaymentListResponse)
async def list_payments(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    recipient_type: RecipientType = Query(None),
    recipient_id: UUID = Query(None),
    status: PaymentStatus = Query(None),
    project_id: UUID = Query(None),
    db: AsyncSession = Depends(get_db),
) -> PaymentListResponse:
    """List payments with optional filters."""
    controller = PaymentController(db)
    return await controller.list_payments(
        skip=skip,
        limit=limit,
        recipient_type=recipient_type,
        recipient_id=recipient_id,
        status=status,
        project_id=project_id,
    )


@router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(
    payment_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> PaymentResponse:
    """Get payment by ID."""
    controller = PaymentController(db)
    payment = await controller.get_payment(payment_id)
    if not payment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payment not found",
        )
    return payment


@router.put("/{payment_id}", response_model=PaymentResponse)
async def update_payment(
    payment_id: UUID,
    payment_data: PaymentUpdate,
    db: AsyncSession = Depends(get_db),
) -> PaymentResponse:
    """Update a payment."""
    controller = PaymentController(db)
    try:
        payment = await controller.update_payment(payment_id, payment_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not payment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payment not found",
        )
    return payment


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_payment(
    payment_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a payment."""
    controller = PaymentController(db)
    deleted = await controller.delete_payment(payment_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payment not found",
        )
