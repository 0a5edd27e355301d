"""
Quote controller.
Coordinates pricing, status changes, conversion and PDF export.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.quote_service import QuoteService
from app.services.document_export_service import DocumentExportService
from app.models.quote import QuoteStatus
from app.schemas.quote import (
    QuoteCreate,
    QuoteUpdate,
    QuoteResponse,
    QuoteListResponse,
    QuoteCalculationRequest,
    QuoteCalculationResponse,
    QuoteConvertRequest,
)
from app.schemas.service_order import ServiceOrderResponse


class QuoteController(BaseController):
    """Controller for quote operations."""

    def __init__(self, session: AsyncSession):
        self.quote_service = QuoteService(session)
        self.export_service = DocumentExportService()

    def calculate(self, request: QuoteCalculationRequest) -> QuoteCalculationResponse:
        """Price line items without saving anything."""
        return self.quote_service.calculate(request)

    async def create_quote(self, quote_data: QuoteCreate) -> QuoteResponse:
        """Create a new quote."""
        return await self.quote_service.create_quote(quote_data)

    async def get_quote(self, quote_id: UUID) -> Optional[QuoteResponse]:
        """Get quote by ID."""
        return await self.quote_service.get_quote(quote_id)

    async def list_quotes(
        self,
        skip: int = 0,
        limit: int = 100,
        project_id: Optional[UUID] = None,
        status: Optional[QuoteStatus] = None,
    ) -> QuoteListResponse:
        """List quotes with optional filters."""
        quotes, total = await self.quote_service.list_quotes(
            skip=skip,
            limit=limit,
            project_id=project_id,
            status=status,
        )
        return QuoteListResponse(items=quotes, total=total)

    async def update_quote(self, quote_id: UUID, quote_data: QuoteUpdate) -> Optional[QuoteResponse]:
        """Update a quote."""
        return await self.quote_service.update_quote(quote_id, quote_data)

    async def update_quote_status(self, quote_id: UUID, status: QuoteStatus) -> Optional[QuoteResponse]:
        """Move a quote through its status lifecycle."""
        return await self.quote_service.update_quote_status(quote_id, status)

    async def convert_to_service_order(
        self,
        quote_id: UUID,
        options: Optional[QuoteConvertRequest] = None,
    ) -> Optional[ServiceOrderResponse]:
        """Turn an approved quote into a service order."""
        return await self.quote_service.convert_to_service_order(quote_id, options)

    async def delete_quote(self, quote_id: UUID) -> bool:
        """Delete a quote."""
        return await self.quote_service.delete_quote(quote_id)

    async def export_quote_pdf(self, quote_id: UUID) -> Optional[bytes]:
        """Render a quote as PDF bytes."""
        quote = await self.quote_service.get_quote_for_document(quote_id)
        if not quote:
            return None
        return self.export_service.render_quote(quote)
