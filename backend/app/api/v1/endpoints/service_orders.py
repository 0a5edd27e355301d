"""
Service order API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.db.session import get_db
from app.controllers.service_order_controller import ServiceOrderController
from app.models.service_order import ServiceOrderStatus
from app.schemas.service_order import (
    ServiceOrderCreate,
    ServiceOrderUpdate,
    ServiceOrderSignature,
    ServiceOrderResponse,
    ServiceOrderListResponse,
)
from app.services.document_export_service import document_number

router = APIRouter()


@router.post("", response_model=ServiceOrderResponse, status_code=status.HTTP_201_CREATED)
async def create_service_order(
    order_data: ServiceOrderCreate,
    db: AsyncSession = Depends(get_db),
) -> ServiceOrderResponse:
    """Create a new service order."""
    controller = ServiceOrderController(db)
    try:
        return await controller.create_service_order(order_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("", response_model=ServiceOrderListResponse)
async def list_service_orders(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    project_id: UUID = Query(None),
    status: ServiceOrderStatus = Query(None),
    assigned_to: UUID = Query(None),
    db: AsyncSession = Depends(get_db),
) -> ServiceOrderListResponse:
    """List service orders with optional filters."""
    controller = ServiceOrderController(db)
    return await controller.list_service_orders(
        skip=skip,
        limit=limit,
        project_id=project_id,
        status=status,
        assigned_to=assigned_to,
    )


@router.get("/{order_id}", response_model=ServiceOrderResponse)
async def get_service_order(
    order_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> ServiceOrderResponse:
    """Get service order by ID."""
    controller = ServiceOrderController(db)
    order = await controller.get_service_order(order_id)
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service order not found",
        )
    return order


@router.put("/{order_id}", response_model=ServiceOrderResponse)
async def update_service_order(
    order_id: UUID,
    order_data: ServiceOrderUpdate,
    db: AsyncSession = Depends(get_db),
) -> ServiceOrderResponse:
    """Update a service order."""
    controller = ServiceOrderController(db)
    try:
        order = await controller.update_service_order(order_id, order_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service order not found",
        )
    return order


@router.post("/{order_id}/signature", response_model=ServiceOrderResponse)
async def sign_service_order(
    order_id: UUID,
    signature_data: ServiceOrderSignature,
    db: AsyncSession = Depends(get_db),
) -> ServiceOrderResponse:
    """Capture the client's signature."""
    controller = ServiceOrderController(db)
    try:
        order = await controller.sign_service_order(order_id, signature_data.signature)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service order not found",
        )
    return order


@router.get("/{order_id}/pdf")
async def export_service_order_pdf(
    order_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Download the service order as a PDF."""
    controller = ServiceOrderController(db)
    content = await controller.export_service_order_pdf(order_id)
    if content is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service order not found",
        )
    return Response(
        content=content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=service_order_{document_number('SO', order_id)}.pdf"
        },
    )


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service_order(
    order_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a service order."""
    controller = ServiceOrderController(db)
    deleted = await controller.delete_service_order(order_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service order not found",
        )
