"""
Quote API endpoints.
Pricing is always recomputed on the server from the submitted line items.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, HTTPException, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.db.session import get_db
from app.controllers.quote_controller import QuoteController
from app.models.quote import QuoteStatus
from app.schemas.quote import (
    QuoteCreate,
    QuoteUpdate,
    QuoteResponse,
    QuoteListResponse,
    QuoteCalculationRequest,
    QuoteCalculationResponse,
    QuoteStatusUpdate,
    QuoteConvertRequest,
)
from app.schemas.service_order import ServiceOrderResponse
from app.services.document_export_service import document_number

router = APIRouter()


@router.post("/calculate", response_model=QuoteCalculationResponse)
async def calculate_quote(
    request: QuoteCalculationRequest,
    db: AsyncSession = Depends(get_db),
) -> QuoteCalculationResponse:
    """Price line items and build the breakdown without saving."""
    controller = QuoteController(db)
    return controller.calculate(request)


@router.post("", response_model=QuoteResponse, status_code=status.HTTP_201_CREATED)
async def create_quote(
    quote_data: QuoteCreate,
    db: AsyncSession = Depends(get_db),
) -> QuoteResponse:
    """Create a new draft quote."""
    controller = QuoteController(db)
    try:
        return await controller.create_quote(quote_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("", response_model=QuoteListResponse)
async def list_quotes(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    project_id: UUID = Query(None),
    status: QuoteStatus = Query(None),
    db: AsyncSession = Depends(get_db),
) -> QuoteListResponse:
    """List quotes with optional filters."""
    controller = QuoteController(db)
    return await controller.list_quotes(
        skip=skip,
        limit=limit,
        project_id=project_id,
        status=status,
    )


@router.get("/{quote_id}", response_model=QuoteResponse)
async def get_quote(
    quote_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> QuoteResponse:
    """Get quote by ID."""
    controller = QuoteController(db)
    quote = await controller.get_quote(quote_id)
    if not quote:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Quote not found",
        )
    return quote


@router.put("/{quote_id}", response_model=QuoteResponse)
async def update_quote(
    quote_id: UUID,
    quote_data: QuoteUpdate,
    db: AsyncSession = Depends(get_db),
) -> QuoteResponse:
    """Update a quote and reprice it."""
    controller = QuoteController(db)
    try:
        quote = await controller.update_quote(quote_id, quote_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not quote:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Quote not found",
        )
    return quote


@router.patch("/{quote_id}/status", response_model=QuoteResponse)
async def update_quote_status(
    quote_id: UUID,
    status_data: QuoteStatusUpdate,
    db: AsyncSession = Depends(get_db),
) -> QuoteResponse:
    """Move a quote to a new status."""
    controller = QuoteController(db)
    try:
        quote = await controller.update_quote_status(quote_id, status_data.status)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not quote:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Quote not found",
        )
    return quote


@router.post(
    "/{quote_id}/convert",
    response_model=ServiceOrderResponse,
    status_code=status.HTTP_201_CREATED,
)
async def convert_quote(
    quote_id: UUID,
    options: Optional[QuoteConvertRequest] = None,
    db: AsyncSession = Depends(get_db),
) -> ServiceOrderResponse:
    """Convert an approved quote into a service order."""
    controller = QuoteController(db)
    try:
        order = await controller.convert_to_service_order(quote_id, options)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Quote not found",
        )
    return order


@router.get("/{quote_id}/pdf")
async def export_quote_pdf(
    quote_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Download the quote as a PDF."""
    controller = QuoteController(db)
    content = await controller.export_quote_pdf(quote_id)
    if content is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Quote not found",
        )
    return Response(
        content=content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=quote_{document_number('Q', quote_id)}.pdf"
        },
    )


@router.delete("/{quote_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_quote(
    quote_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a quote not referenced by service orders or invoices."""
    controller = QuoteController(db)
    try:
        deleted = await controller.delete_quote(quote_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Quote not found",
        )
