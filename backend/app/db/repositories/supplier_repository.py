"""
Supplier repository for database operations.
"""

from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from app.db.repositories.base_repository import BaseRepository
from app.models.supplier import Supplier
from app.models.purchase_order import PurchaseOrder


class SupplierRepository(BaseRepository[Supplier]):
    """Repository for supplier operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Supplier, session)

    async def has_purchase_orders(self, supplier_id: UUID) -> bool:
        result = await self.session.execute(
            select(func.count()).select_from(PurchaseOrder).where(PurchaseOrder.supplier_id == supplier_id)
        )
        return result.scalar_one() > 0
