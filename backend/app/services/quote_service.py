"""
Quote service with business logic for pricing, status changes and
conversion into service orders.
"""

import logging
from typing import List, Optional
from uuid import UUID
from datetime import date, datetime, timedelta, timezone
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.cache import AppCache, REPORTS, CALENDAR
from app.core.config import settings
from app.services.base_service import BaseService
from app.services.activity_service import ActivityService
from app.db.repositories.quote_repository import QuoteRepository
from app.db.repositories.project_repository import ProjectRepository
from app.db.repositories.service_order_repository import ServiceOrderRepository
from app.models.project import ProjectStatus
from app.models.quote import Quote, QuoteStatus, can_transition
from app.models.service_order import ServiceOrderStatus
from app.schemas.quote import (
    QuoteCreate, QuoteUpdate, QuoteResponse, QuoteCalculationRequest,
    QuoteCalculationResponse, CalculatedLineResponse, QuoteConvertRequest,
)
from app.schemas.service_order import ServiceOrderResponse
from app.utils.line_items import dump_items
from app.utils.quote_calculator import calculate_quote, apply_breakdown
from app.utils.service_order_text import build_service_order_details, materials_summary

logger = logging.getLogger(__name__)

PRICING_FIELDS = (
    "materials_estimate",
    "labor_estimate",
    "profit_margin",
    "additional_costs",
    "optional_services",
    "scope_of_work",
)

# Project status that follows a quote status change
PROJECT_STATUS_FOR_QUOTE = {
    QuoteStatus.SENT: ProjectStatus.QUOTED,
    QuoteStatus.APPROVED: ProjectStatus.APPROVED,
}


class QuoteService(BaseService):
    """Service for quote operations."""

    def __init__(self, session: AsyncSession, cache: Optional[AppCache] = None):
        from app.deps.di_container import get_container

        self.session = session
        self.quote_repo = QuoteRepository(session)
        self.project_repo = ProjectRepository(session)
        self.service_order_repo = ServiceOrderRepository(session)
        self.activities = ActivityService(session)
        self.cache = cache or get_container().app_cache()

    @staticmethod
    def _price(values: dict) -> dict:
        """
        Recompute total_estimate and the breakdown section of scope_of_work.

        values must hold every pricing field; line items may be models or
        stored dicts. Returns the columns to persist.
        """
        calculation = calculate_quote(
            values["materials_estimate"],
            values["labor_estimate"],
            values["additional_costs"],
            values["profit_margin"],
            values["optional_services"],
        )
        for warning in calculation.warnings:
            logger.warning(f"Quote pricing input coerced: {warning}")
        return {
            "total_estimate": calculation.total_estimate,
            "scope_of_work": apply_breakdown(values["scope_of_work"], calculation.breakdown),
        }

    def calculate(self, request: QuoteCalculationRequest) -> QuoteCalculationResponse:
        """Price line items without touching the database."""
        calculation = calculate_quote(
            request.materials_estimate,
            request.labor_estimate,
            request.additional_costs,
            request.profit_margin,
            request.optional_services,
        )
        scope = None
        if request.scope_of_work is not None:
            scope = apply_breakdown(request.scope_of_work, calculation.breakdown)
        return QuoteCalculationResponse(
            lines=[CalculatedLineResponse.model_validate(line) for line in calculation.lines],
            materials_subtotal=calculation.materials_subtotal,
            labor_subtotal=calculation.labor_subtotal,
            base_subtotal=calculation.base_subtotal,
            additional_costs=calculation.additional_costs,
            profit_margin=calculation.profit_margin,
            profit_amount=calculation.profit_amount,
            total_estimate=calculation.total_estimate,
            breakdown=calculation.breakdown,
            scope_of_work=scope,
            warnings=list(calculation.warnings),
        )

    async def create_quote(self, quote_data: QuoteCreate) -> QuoteResponse:
        """
        Create a draft quote with a server-computed total.

        Raises:
            ValueError: project does not exist
        """
        project = await self.project_repo.get(quote_data.project_id)
        if not project:
            raise ValueError("Project not found")

        quote_dict = quote_data.model_dump()
        quote_dict["materials_estimate"] = dump_items(quote_data.materials_estimate)
        quote_dict["labor_estimate"] = dump_items(quote_data.labor_estimate)
        quote_dict.update(self._price(quote_dict))
        quote_dict["status"] = QuoteStatus.DRAFT
        if quote_dict.get("valid_until") is None:
            quote_dict["valid_until"] = date.today() + timedelta(days=settings.QUOTE_VALIDITY_DAYS)

        quote = await self.quote_repo.create(**quote_dict)
        await self.activities.record(
            "quote_created",
            f"Quote created for {project.title}",
            project_id=project.id,
            client_id=project.client_id,
        )
        await self.commit_and_refresh(quote)
        self.cache.invalidate(REPORTS)
        return QuoteResponse.model_validate(quote)

    async def get_quote(self, quote_id: UUID) -> Optional[QuoteResponse]:
        """Get quote by ID."""
        quote = await self.quote_repo.get(quote_id)
        if not quote:
            return None
        return QuoteResponse.model_validate(quote)

    async def list_quotes(
        self,
        skip: int = 0,
        limit: int = 100,
        project_id: Optional[UUID] = None,
        status: Optional[QuoteStatus] = None,
    ) -> tuple[List[QuoteResponse], int]:
        """List quotes with optional filters."""
        filters = {"project_id": project_id, "status": status}
        quotes = await self.quote_repo.list(skip=skip, limit=limit, **filters)
        total = await self.quote_repo.count(**filters)
        return [QuoteResponse.model_validate(q) for q in quotes], total

    async def update_quote(
        self,
        quote_id: UUID,
        quote_data: QuoteUpdate,
    ) -> Optional[QuoteResponse]:
        """
        Update a quote, repricing it when any pricing field changes.

        Raises:
            ValueError: the quote was already converted
        """
        quote = await self.quote_repo.get(quote_id)
        if not quote:
            return None
        if quote.status == QuoteStatus.CONVERTED:
            raise ValueError("Converted quotes cannot be edited")

        update_dict = quote_data.model_dump(exclude_unset=True)
        for field in ("materials_estimate", "labor_estimate"):
            if update_dict.get(field) is not None:
                update_dict[field] = dump_items(getattr(quote_data, field))

        if any(field in update_dict for field in PRICING_FIELDS):
            merged = {field: getattr(quote, field) for field in PRICING_FIELDS}
            merged.update({k: v for k, v in update_dict.items() if k in PRICING_FIELDS})
            update_dict.update(self._price(merged))

        updated = await self.quote_repo.update(quote_id, **update_dict)
        project = await self.project_repo.get(updated.project_id)
        await self.activities.record(
            "quote_updated",
            f"Quote updated for {project.title}",
            project_id=project.id,
            client_id=project.client_id,
        )
        await self.commit_and_refresh(updated)
        self.cache.invalidate(REPORTS)
        return QuoteResponse.model_validate(updated)

    async def update_quote_status(
        self,
        quote_id: UUID,
        status: QuoteStatus,
    ) -> Optional[QuoteResponse]:
        """
        Move a quote to a new status.

        Raises:
            ValueError: the transition is not allowed
        """
        quote = await self.quote_repo.get(quote_id)
        if not quote:
            return None
        if quote.status == status:
            return QuoteResponse.model_validate(quote)
        if status == QuoteStatus.CONVERTED:
            raise ValueError("Quotes are converted through the convert action")
        if not can_transition(quote.status, status):
            raise ValueError(
                f"Cannot change quote status from {quote.status.value} to {status.value}"
            )

        update_dict = {"status": status}
        today = datetime.now(timezone.utc).date()
        if status == QuoteStatus.SENT:
            update_dict["sent_date"] = today
        elif status == QuoteStatus.APPROVED:
            update_dict["approved_date"] = today
        elif status == QuoteStatus.REJECTED:
            update_dict["rejected_date"] = today

        updated = await self.quote_repo.update(quote_id, **update_dict)
        project = await self.project_repo.get(updated.project_id)
        if status in PROJECT_STATUS_FOR_QUOTE:
            await self.project_repo.update(project.id, status=PROJECT_STATUS_FOR_QUOTE[status])

        await self.activities.record(
            f"quote_{status.value}",
            f"Quote for {project.title} marked as {status.value}",
            project_id=project.id,
            client_id=project.client_id,
        )
        await self.commit_and_refresh(updated)
        logger.info(f"Quote {quote_id} moved to {status.value}")
        self.cache.invalidate(REPORTS, CALENDAR)
        return QuoteResponse.model_validate(updated)

    async def convert_to_service_order(
        self,
        quote_id: UUID,
        options: Optional[QuoteConvertRequest] = None,
    ) -> Optional[ServiceOrderResponse]:
        """
        Create a pending service order from an approved quote.

        The order details never carry prices. The quote becomes converted.

        Raises:
            ValueError: the quote is not approved
        """
        quote = await self.quote_repo.get_with_project(quote_id)
        if not quote:
            return None
        if quote.status != QuoteStatus.APPROVED:
            raise ValueError("Only approved quotes can be converted to service orders")

        options = options or QuoteConvertRequest()
        project = quote.project
        order = await self.service_order_repo.create(
            project_id=project.id,
            quote_id=quote.id,
            details=build_service_order_details(project, quote),
            materials_required=materials_summary(quote) or None,
            status=ServiceOrderStatus.PENDING,
            before_images=list(project.images or []),
            after_images=[],
            assigned_staff=[],
            assigned_subcontractors=[],
            **options.model_dump(),
        )
        await self.quote_repo.update(quote.id, status=QuoteStatus.CONVERTED)

        await self.activities.record(
            "service_order_created",
            f"Service order created for {project.title}",
            project_id=project.id,
            client_id=project.client_id,
        )
        await self.activities.record(
            "quote_converted",
            f"Quote for {project.title} converted to a service order",
            project_id=project.id,
            client_id=project.client_id,
        )
        await self.commit_and_refresh(order)
        logger.info(f"Quote {quote_id} converted to service order {order.id}")
        self.cache.invalidate(REPORTS, CALENDAR)
        return ServiceOrderResponse.model_validate(order)

    async def delete_quote(self, quote_id: UUID) -> bool:
        """
        Delete a quote.

        Raises:
            ValueError: a service order or invoice references the quote
        """
        quote = await self.quote_repo.get(quote_id)
        if not quote:
            return False
        if await self.quote_repo.is_referenced(quote_id):
            raise ValueError("Cannot delete a quote referenced by service orders or invoices")

        project = await self.project_repo.get(quote.project_id)
        deleted = await self.quote_repo.delete(quote_id)
        await self.activities.record(
            "quote_deleted",
            f"Quote deleted for {project.title}",
            project_id=project.id,
            client_id=project.client_id,
        )
        await self.session.commit()
        self.cache.invalidate(REPORTS)
        return deleted

    async def get_quote_for_document(self, quote_id: UUID) -> Optional[Quote]:
        """Quote with project and client loaded, for rendering."""
        return await self.quote_repo.get_with_project(quote_id)
