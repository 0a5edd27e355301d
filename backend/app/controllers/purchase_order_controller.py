"""
Purchase order controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.purchase_order_service import PurchaseOrderService
from app.models.purchase_order import PurchaseOrderStatus
from app.schemas.purchase_order import (
    PurchaseOrderCreate,
    PurchaseOrderUpdate,
    PurchaseOrderResponse,
    PurchaseOrderListResponse,
)


class PurchaseOrderController(BaseController):
    """Controller for purchase order operations."""

    def __init__(self, session: AsyncSession):
        self.purchase_order_service = PurchaseOrderService(session)

    async def create_purchase_order(self, order_data: PurchaseOrderCreate) -> PurchaseOrderResponse:
        return await self.purchase_order_service.create_purchase_order(order_data)

    async def get_purchase_order(self, order_id: UUID) -> Optional[PurchaseOrderResponse]:
        return await self.purchase_order_service.get_purchase_order(order_id)

    async def list_purchase_orders(
        self,
        skip: int = 0,
        limit: int = 100,
        supplier_id: Optional[UUID] = None,
        project_id: Optional[UUID] = None,
        status: Optional[PurchaseOrderStatus] = None,
    ) -> PurchaseOrderListResponse:
        """List purchase orders with optional filters."""
        orders, total = await self.purchase_order_service.list_purchase_orders(
            skip=skip,
            limit=limit,
            supplier_id=supplier_id,
            project_id=project_id,
            status=status,
        )
        return PurchaseOrderListResponse(items=orders, total=total)

    async def update_purchase_order(
        self,
        order_id: UUID,
        order_data: PurchaseOrderUpdate,
    ) -> Optional[PurchaseOrderResponse]:
        return await self.purchase_order_service.update_purchase_order(order_id, order_data)

    async def delete_purchase_order(self, order_id: UUID) -> bool:
        return await self.purchase_order_service.delete_purchase_order(order_id)
