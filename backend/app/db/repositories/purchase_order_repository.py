"""
Purchase order repository for database operations.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.repositories.base_repository import BaseRepository
from app.models.purchase_order import PurchaseOrder


class PurchaseOrderRepository(BaseRepository[PurchaseOrder]):
    """Repository for purchase order operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(PurchaseOrder, session)

    async def get_by_number(self, order_number: str) -> Optional[PurchaseOrder]:
        result = await self.session.execute(
            select(PurchaseOrder).where(PurchaseOrder.order_number == order_number)
        )
        return result.scalar_one_or_none()
