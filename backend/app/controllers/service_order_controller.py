"""
Service order controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.service_order_service import ServiceOrderService
from app.services.document_export_service import DocumentExportService
from app.models.service_order import ServiceOrderStatus
from app.schemas.service_order import (
    ServiceOrderCreate,
    ServiceOrderUpdate,
    ServiceOrderResponse,
    ServiceOrderListResponse,
)


class ServiceOrderController(BaseController):
    """Controller for service order operations."""

    def __init__(self, session: AsyncSession):
        self.service_order_service = ServiceOrderService(session)
        self.export_service = DocumentExportService()

    async def create_service_order(self, order_data: ServiceOrderCreate) -> ServiceOrderResponse:
        """Create a new service order."""
        return await self.service_order_service.create_service_order(order_data)

    async def get_service_order(self, order_id: UUID) -> Optional[ServiceOrderResponse]:
        """Get service order by ID."""
        return await self.service_order_service.get_service_order(order_id)

    async def list_service_orders(
        self,
        skip: int = 0,
        limit: int = 100,
        project_id: Optional[UUID] = None,
        status: Optional[ServiceOrderStatus] = None,
        assigned_to: Optional[UUID] = None,
    ) -> ServiceOrderListResponse:
        """List service orders with optional filters."""
        orders, total = await self.service_order_service.list_service_orders(
            skip=skip,
            limit=limit,
            project_id=project_id,
            status=status,
            assigned_to=assigned_to,
        )
        return ServiceOrderListResponse(items=orders, total=total)

    async def update_service_order(
        self,
        order_id: UUID,
        order_data: ServiceOrderUpdate,
    ) -> Optional[ServiceOrderResponse]:
        """Update a service order."""
        return await self.service_order_service.update_service_order(order_id, order_data)

    async def sign_service_order(self, order_id: UUID, signature: str) -> Optional[ServiceOrderResponse]:
        """Store the client's signature."""
        return await self.service_order_service.sign_service_order(order_id, signature)

    async def delete_service_order(self, order_id: UUID) -> bool:
        """Delete a service order."""
        return await self.service_order_service.delete_service_order(order_id)

    async def export_service_order_pdf(self, order_id: UUID) -> Optional[bytes]:
        """Render a service order as PDF bytes."""
        order = await self.service_order_service.get_service_order_for_document(order_id)
        if not order:
            return None
        assignee = await self.service_order_service.get_assignee_name(order)
        return self.export_service.render_service_order(order, assignee_name=assignee)
