"""
Purchase order service with business logic.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import BaseService
from app.db.repositories.purchase_order_repository import PurchaseOrderRepository
from app.db.repositories.supplier_repository import SupplierRepository
from app.db.repositories.project_repository import ProjectRepository
from app.models.purchase_order import PurchaseOrderStatus
from app.schemas.purchase_order import (
    PurchaseOrderCreate, PurchaseOrderUpdate, PurchaseOrderResponse,
)
from app.utils.invoice_numbers import generate_purchase_order_number


class PurchaseOrderService(BaseService):
    """Service for purchase order operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.purchase_order_repo = PurchaseOrderRepository(session)
        self.supplier_repo = SupplierRepository(session)
        self.project_repo = ProjectRepository(session)

    async def create_purchase_order(self, order_data: PurchaseOrderCreate) -> PurchaseOrderResponse:
        """
        Create a purchase order.

        Raises:
            ValueError: unknown supplier or project, or duplicate order number
        """
        order_dict = order_data.model_dump()
        if not await self.supplier_repo.exists(order_dict["supplier_id"]):
            raise ValueError("Supplier not found")
        if order_dict.get("project_id") and not await self.project_repo.exists(order_dict["project_id"]):
            raise ValueError("Project not found")

        if not order_dict.get("order_number"):
            order_dict["order_number"] = generate_purchase_order_number(order_dict["order_date"])
        elif await self.purchase_order_repo.get_by_number(order_dict["order_number"]):
            raise ValueError(f"Purchase order {order_dict['order_number']} already exists")

        order = await self.purchase_order_repo.create(**order_dict)
        await self.commit_and_refresh(order)
        return PurchaseOrderResponse.model_validate(order)

    async def get_purchase_order(self, order_id: UUID) -> Optional[PurchaseOrderResponse]:
        """Get purchase order by ID."""
        order = await self.purchase_order_repo.get(order_id)
        if not order:
            return None
        return PurchaseOrderResponse.model_validate(order)

    async def list_purchase_orders(
        self,
        skip: int = 0,
        limit: int = 100,
        supplier_id: Optional[UUID] = None,
        project_id: Optional[UUID] = None,
        status: Optional[PurchaseOrderStatus] = None,
    ) -> tuple[List[PurchaseOrderResponse], int]:
        """List purchase orders with optional filters."""
        filters = {"supplier_id": supplier_id, "project_id": project_id, "status": status}
        orders = await self.purchase_order_repo.list(skip=skip, limit=limit, **filters)
        total = await self.purchase_order_repo.count(**filters)
        return [PurchaseOrderResponse.model_validate(o) for o in orders], total

    async def update_purchase_order(
        self,
        order_id: UUID,
        order_data: PurchaseOrderUpdate,
    ) -> Optional[PurchaseOrderResponse]:
        """Update a purchase order."""
        if not await self.purchase_order_repo.exists(order_id):
            return None
        update_dict = order_data.model_dump(exclude_unset=True)
        if update_dict.get("project_id") and not await self.project_repo.exists(update_dict["project_id"]):
            raise ValueError("Project not found")
        updated = await self.purchase_order_repo.update(order_id, **update_dict)
        await self.commit_and_refresh(updated)
        return PurchaseOrderResponse.model_validate(updated)

    async def delete_purchase_order(self, order_id: UUID) -> bool:
        """Delete a purchase order."""
        if not await self.purchase_order_repo.exists(order_id):
            return False
        deleted = await self.purchase_order_repo.delete(order_id)
        await self.session.commit()
        return deleted
