"""
Invoice controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.invoice_service import InvoiceService
from app.models.invoice import InvoiceStatus
from app.schemas.invoice import (
    InvoiceCreate,
    InvoiceUpdate,
    InvoiceResponse,
    InvoiceListResponse,
    PaymentIntentResponse,
)


class InvoiceController(BaseController):
    """Controller for invoice operations."""

    def __init__(self, session: AsyncSession):
        self.invoice_service = InvoiceService(session)

    async def create_invoice(self, invoice_data: InvoiceCreate) -> InvoiceResponse:
        """Create a new invoice."""
        return await self.invoice_service.create_invoice(invoice_data)

    async def get_invoice(self, invoice_id: UUID) -> Optional[InvoiceResponse]:
        """Get invoice by ID."""
        return await self.invoice_service.get_invoice(invoice_id)

    async def list_invoices(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[InvoiceStatus] = None,
        client_id: Optional[UUID] = None,
        project_id: Optional[UUID] = None,
    ) -> InvoiceListResponse:
        """List invoices with optional filters."""
        invoices, total = await self.invoice_service.list_invoices(
            skip=skip,
            limit=limit,
            status=status,
            client_id=client_id,
            project_id=project_id,
        )
        return InvoiceListResponse(items=invoices, total=total)

    async def update_invoice(self, invoice_id: UUID, invoice_data: InvoiceUpdate) -> Optional[InvoiceResponse]:
        """Update an invoice."""
        return await self.invoice_service.update_invoice(invoice_id, invoice_data)

    async def delete_invoice(self, invoice_id: UUID) -> bool:
        """Delete an invoice."""
        return await self.invoice_service.delete_invoice(invoice_id)

    async def create_payment_intent(self, invoice_id: UUID) -> Optional[PaymentIntentResponse]:
        """Open an online payment for the invoice's outstanding balance."""
        return await self.invoice_service.create_payment_intent(invoice_id)
