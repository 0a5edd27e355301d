"""
Service order service with business logic.
"""

import logging
from datetime import datetime
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.cache import AppCache, CALENDAR
from app.services.base_service import BaseService
from app.services.activity_service import ActivityService
from app.db.repositories.service_order_repository import ServiceOrderRepository
from app.db.repositories.project_repository import ProjectRepository
from app.db.repositories.quote_repository import QuoteRepository
from app.db.repositories.staff_repository import StaffRepository
from app.db.repositories.subcontractor_repository import SubcontractorRepository
from app.models.service_order import AssigneeType, ServiceOrder, ServiceOrderStatus
from app.schemas.service_order import (
    ServiceOrderCreate, ServiceOrderUpdate, ServiceOrderResponse,
)

logger = logging.getLogger(__name__)

ID_LIST_FIELDS = ("assigned_staff", "assigned_subcontractors")


class ServiceOrderService(BaseService):
    """Service for service order operations."""

    def __init__(self, session: AsyncSession, cache: Optional[AppCache] = None):
        from app.deps.di_container import get_container

        self.session = session
        self.service_order_repo = ServiceOrderRepository(session)
        self.project_repo = ProjectRepository(session)
        self.quote_repo = QuoteRepository(session)
        self.staff_repo = StaffRepository(session)
        self.subcontractor_repo = SubcontractorRepository(session)
        self.activities = ActivityService(session)
        self.cache = cache or get_container().app_cache()

    async def _validate(self, values: dict) -> None:
        """Reject dangling references."""
        if values.get("project_id") is not None and not await self.project_repo.exists(values["project_id"]):
            raise ValueError("Project not found")
        if values.get("quote_id") is not None and not await self.quote_repo.exists(values["quote_id"]):
            raise ValueError("Quote not found")
        if values.get("supervisor_id") is not None and not await self.staff_repo.exists(values["supervisor_id"]):
            raise ValueError("Supervisor not found")
        for field in ID_LIST_FIELDS:
            if values.get(field) is not None:
                values[field] = [str(item) for item in values[field]]

    async def create_service_order(self, order_data: ServiceOrderCreate) -> ServiceOrderResponse:
        """
        Create a service order.

        Raises:
            ValueError: unknown project, quote or supervisor
        """
        order_dict = order_data.model_dump()
        await self._validate(order_dict)

        order = await self.service_order_repo.create(**order_dict)
        project = await self.project_repo.get(order.project_id)
        await self.activities.record(
            "service_order_created",
            f"Service order created for {project.title}",
            project_id=project.id,
            client_id=project.client_id,
        )
        await self.commit_and_refresh(order)
        self.cache.invalidate(CALENDAR)
        return ServiceOrderResponse.model_validate(order)

    async def get_service_order(self, order_id: UUID) -> Optional[ServiceOrderResponse]:
        """Get service order by ID."""
        order = await self.service_order_repo.get(order_id)
        if not order:
            return None
        return ServiceOrderResponse.model_validate(order)

    async def list_service_orders(
        self,
        skip: int = 0,
        limit: int = 100,
        project_id: Optional[UUID] = None,
        status: Optional[ServiceOrderStatus] = None,
        assigned_to: Optional[UUID] = None,
    ) -> tuple[List[ServiceOrderResponse], int]:
        """List service orders with optional filters."""
        filters = {"project_id": project_id, "status": status, "assigned_to": assigned_to}
        orders = await self.service_order_repo.list(skip=skip, limit=limit, **filters)
        total = await self.service_order_repo.count(**filters)
        return [ServiceOrderResponse.model_validate(o) for o in orders], total

    async def update_service_order(
        self,
        order_id: UUID,
        order_data: ServiceOrderUpdate,
    ) -> Optional[ServiceOrderResponse]:
        """Update a service order."""
        order = await self.service_order_repo.get(order_id)
        if not order:
            return None

        update_dict = order_data.model_dump(exclude_unset=True)
        await self._validate(update_dict)
        previous_status = order.status

        updated = await self.service_order_repo.update(order_id, **update_dict)
        project = await self.project_repo.get(updated.project_id)
        if updated.status != previous_status:
            activity_type = f"service_order_{updated.status.value}"
            description = f"Service order for {project.title} is now {updated.status.value}"
        else:
            activity_type = "service_order_updated"
            description = f"Service order updated for {project.title}"
        await self.activities.record(
            activity_type, description, project_id=project.id, client_id=project.client_id
        )
        await self.commit_and_refresh(updated)
        self.cache.invalidate(CALENDAR)
        return ServiceOrderResponse.model_validate(updated)

    async def sign_service_order(self, order_id: UUID, signature: str) -> Optional[ServiceOrderResponse]:
        """
        Capture the client's signature.

        Raises:
            ValueError: the order was already signed
        """
        order = await self.service_order_repo.get(order_id)
        if not order:
            return None
        if order.client_signature:
            raise ValueError("Service order has already been signed")

        updated = await self.service_order_repo.update(
            order_id,
            client_signature=signature,
            signed_date=datetime.now(),
        )
        project = await self.project_repo.get(updated.project_id)
        await self.activities.record(
            "service_order_signed",
            f"Client signed the service order for {project.title}",
            project_id=project.id,
            client_id=project.client_id,
        )
        await self.commit_and_refresh(updated)
        return ServiceOrderResponse.model_validate(updated)

    async def delete_service_order(self, order_id: UUID) -> bool:
        """Delete a service order."""
        order = await self.service_order_repo.get(order_id)
        if not order:
            return False

        project = await self.project_repo.get(order.project_id)
        deleted = await self.service_order_repo.delete(order_id)
        await self.activities.record(
            "service_order_deleted",
            f"Service order deleted for {project.title}",
            project_id=project.id,
            client_id=project.client_id,
        )
        await self.session.commit()
        self.cache.invalidate(CALENDAR)
        return deleted

    async def get_service_order_for_document(self, order_id: UUID) -> Optional[ServiceOrder]:
        """Service order with project and client loaded, for rendering."""
        return await self.service_order_repo.get_with_project(order_id)

    async def get_assignee_name(self, order: ServiceOrder) -> Optional[str]:
        """Display name of whoever the order is assigned to."""
        if order.assigned_to is None:
            return None
        repo = self.subcontractor_repo if order.assigned_type == AssigneeType.SUBCONTRACTOR else self.staff_repo
        assignee = await repo.get(order.assigned_to)
        return assignee.name if assignee else None
