"""
Invoice service with business logic, including online payment requests.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import PaymentProviderNotConfigured
from app.services.base_service import BaseService
from app.services.activity_service import ActivityService
from app.db.repositories.invoice_repository import InvoiceRepository
from app.db.repositories.client_repository import ClientRepository
from app.db.repositories.project_repository import ProjectRepository
from app.db.repositories.quote_repository import QuoteRepository
from app.models.invoice import InvoiceStatus
from app.schemas.invoice import (
    InvoiceCreate, InvoiceUpdate, InvoiceResponse, PaymentIntentResponse,
)
from app.utils.invoice_numbers import generate_invoice_number

logger = logging.getLogger(__name__)

MAX_NUMBER_ATTEMPTS = 5


class InvoiceService(BaseService):
    """Service for invoice operations."""

    def __init__(self, session: AsyncSession, payment_provider=None):
        from app.deps.di_container import get_container

        self.session = session
        self.invoice_repo = InvoiceRepository(session)
        self.client_repo = ClientRepository(session)
        self.project_repo = ProjectRepository(session)
        self.quote_repo = QuoteRepository(session)
        self.activities = ActivityService(session)
        self.payment_provider = payment_provider or get_container().payment_provider()

    async def _next_invoice_number(self) -> str:
        for _ in range(MAX_NUMBER_ATTEMPTS):
            number = generate_invoice_number()
            if not await self.invoice_repo.get_by_number(number):
                return number
        raise RuntimeError("Could not generate a unique invoice number")

    @staticmethod
    def _settle(values: dict, total: Decimal, paid: Decimal, status: InvoiceStatus) -> None:
        """Mark fully paid invoices as paid unless they were cancelled."""
        if total > 0 and paid >= total and status != InvoiceStatus.CANCELLED:
            values["status"] = InvoiceStatus.PAID

    async def create_invoice(self, invoice_data: InvoiceCreate) -> InvoiceResponse:
        """
        Create an invoice with a generated number.

        Raises:
            ValueError: unknown client, project or quote
        """
        invoice_dict = invoice_data.model_dump()
        client = await self.client_repo.get(invoice_dict["client_id"])
        if not client:
            raise ValueError("Client not found")
        if not await self.project_repo.exists(invoice_dict["project_id"]):
            raise ValueError("Project not found")
        if invoice_dict.get("quote_id") and not await self.quote_repo.exists(invoice_dict["quote_id"]):
            raise ValueError("Quote not found")

        invoice_dict["invoice_number"] = await self._next_invoice_number()
        if invoice_dict.get("issue_date") is None:
            invoice_dict["issue_date"] = date.today()
        self._settle(
            invoice_dict, invoice_dict["total_amount"], invoice_dict["amount_paid"], invoice_dict["status"]
        )

        invoice = await self.invoice_repo.create(**invoice_dict)
        await self.activities.record(
            "invoice_created",
            f"Invoice {invoice.invoice_number} created for {client.name}",
            project_id=invoice.project_id,
            client_id=client.id,
        )
        await self.commit_and_refresh(invoice)
        return InvoiceResponse.model_validate(invoice)

    async def get_invoice(self, invoice_id: UUID) -> Optional[InvoiceResponse]:
        """Get invoice by ID."""
        invoice = await self.invoice_repo.get(invoice_id)
        if not invoice:
            return None
        return InvoiceResponse.model_validate(invoice)

    async def list_invoices(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[InvoiceStatus] = None,
        client_id: Optional[UUID] = None,
        project_id: Optional[UUID] = None,
    ) -> tuple[List[InvoiceResponse], int]:
        """List invoices with optional filters."""
        filters = {"status": status, "client_id": client_id, "project_id": project_id}
        invoices = await self.invoice_repo.list(skip=skip, limit=limit, **filters)
        total = await self.invoice_repo.count(**filters)
        return [InvoiceResponse.model_validate(i) for i in invoices], total

    async def update_invoice(
        self,
        invoice_id: UUID,
        invoice_data: InvoiceUpdate,
    ) -> Optional[InvoiceResponse]:
        """Update an invoice."""
        invoice = await self.invoice_repo.get(invoice_id)
        if not invoice:
            return None

        update_dict = invoice_data.model_dump(exclude_unset=True)
        self._settle(
            update_dict,
            update_dict.get("total_amount", invoice.total_amount),
            update_dict.get("amount_paid", invoice.amount_paid),
            update_dict.get("status", invoice.status),
        )

        updated = await self.invoice_repo.update(invoice_id, **update_dict)
        await self.activities.record(
            "invoice_updated",
            f"Invoice {updated.invoice_number} updated ({updated.status.value})",
            project_id=updated.project_id,
            client_id=updated.client_id,
        )
        await self.commit_and_refresh(updated)
        return InvoiceResponse.model_validate(updated)

    async def delete_invoice(self, invoice_id: UUID) -> bool:
        """Delete an invoice."""
        invoice = await self.invoice_repo.get(invoice_id)
        if not invoice:
            return False

        number, project_id, client_id = invoice.invoice_number, invoice.project_id, invoice.client_id
        deleted = await self.invoice_repo.delete(invoice_id)
        await self.activities.record(
            "invoice_deleted",
            f"Invoice {number} deleted",
            project_id=project_id,
            client_id=client_id,
        )
        await self.session.commit()
        return deleted

    async def create_payment_intent(self, invoice_id: UUID) -> Optional[PaymentIntentResponse]:
        """
        Ask the payment provider to collect the outstanding balance.

        Raises:
            PaymentProviderNotConfigured: no provider key configured
            PaymentProviderError: the provider rejected the request
            ValueError: nothing left to pay
        """
        invoice = await self.invoice_repo.get(invoice_id)
        if not invoice:
            return None
        if not self.payment_provider.configured:
            raise PaymentProviderNotConfigured()
        if invoice.status == InvoiceStatus.CANCELLED:
            raise ValueError("Cannot collect payment for a cancelled invoice")

        outstanding = Decimal(invoice.total_amount) - Decimal(invoice.amount_paid or 0)
        if outstanding <= 0:
            raise ValueError("Invoice has no outstanding balance")

        intent = await self.payment_provider.create_payment_intent(
            outstanding,
            metadata={
                "invoice_id": str(invoice.id),
                "invoice_number": invoice.invoice_number,
                "client_id": str(invoice.client_id),
            },
        )
        await self.invoice_repo.update(invoice_id, payment_intent_id=intent["id"])
        await self.activities.record(
            "invoice_payment_requested",
            f"Online payment requested for invoice {invoice.invoice_number}",
            project_id=invoice.project_id,
            client_id=invoice.client_id,
        )
        await self.session.commit()
        logger.info(f"Payment intent {intent['id']} created for invoice {invoice.invoice_number}")
        return PaymentIntentResponse(
            invoice_id=invoice.id,
            payment_intent_id=intent["id"],
            client_secret=intent["client_secret"],
            amount=outstanding,
            currency=intent["currency"],
        )
