"""
Purchase order API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.db.session import get_db
from app.controllers.purchase_order_controller import PurchaseOrderController
from app.models.purchase_order import PurchaseOrderStatus
from app.schemas.purchase_order import (
    PurchaseOrderCreate,
    PurchaseOrderUpdate,
    PurchaseOrderResponse,
    PurchaseOrderListResponse,
)

router = APIRouter()


@router.post("", response_model=PurchaseOrderResponse, status_code=status.HTTP_201_CREATED)
async def create_purchase_order(
    order_data: PurchaseOrderCreate,
    db: AsyncSession = Depends(get_db),
) -> PurchaseOrderResponse:
    """Create a purchase order; a number is generated when omitted."""
    controller = PurchaseOrderController(db)
    try:
        return await controller.create_purchase_order(order_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("", response_model=PurchaseOrderListResponse)
async def list_purchase_orders(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    supplier_id: UUID = Query(None),
    project_id: UUID = Query(None),
    status: PurchaseOrderStatus = Query(None),
    db: AsyncSession = Depends(get_db),
) -> PurchaseOrderListResponse:
    """List purchase orders with optional filters."""
    controller = PurchaseOrderController(db)
    return await controller.list_purchase_orders(
        skip=skip,
        limit=limit,
        supplier_id=supplier_id,
        project_id=project_id,
        status=status,
    )


@router.get("/{order_id}", response_model=PurchaseOrderResponse)
async def get_purchase_order(
    order_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> PurchaseOrderResponse:
    """Get purchase order by ID."""
    controller = PurchaseOrderController(db)
    order = await controller.get_purchase_order(order_id)
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Purchase order not found",
        )
    return order


@router.put("/{order_id}", response_model=PurchaseOrderResponse)
async def update_purchase_order(
    order_id: UUID,
    order_data: PurchaseOrderUpdate,
    db: AsyncSession = Depends(get_db),
) -> PurchaseOrderResponse:
    """Update a purchase order."""
    controller = PurchaseOrderController(db)
    try:
        order = await controller.update_purchase_order(order_id, order_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Purchase order not found",
        )
    return order


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_purchase_order(
    order_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a purchase order."""
    controller = PurchaseOrderController(db)
    deleted = await controller.delete_purchase_order(order_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Purchase order not found",
        )
