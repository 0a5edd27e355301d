"""
Supplier service with business logic.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import BaseService
from app.db.repositories.supplier_repository import SupplierRepository
from app.schemas.supplier import SupplierCreate, SupplierUpdate, SupplierResponse


class SupplierService(BaseService):
    """Service for supplier operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.supplier_repo = SupplierRepository(session)

    async def create_supplier(self, supplier_data: SupplierCreate) -> SupplierResponse:
        """Create a supplier."""
        supplier = await self.supplier_repo.create(**supplier_data.model_dump())
        await self.commit_and_refresh(supplier)
        return SupplierResponse.model_validate(supplier)

    async def get_supplier(self, supplier_id: UUID) -> Optional[SupplierResponse]:
        """Get supplier by ID."""
        supplier = await self.supplier_repo.get(supplier_id)
        if not supplier:
            return None
        return SupplierResponse.model_validate(supplier)

    async def list_suppliers(
        self,
        skip: int = 0,
        limit: int = 100,
        category: Optional[str] = None,
    ) -> tuple[List[SupplierResponse], int]:
        """List suppliers, optionally by category."""
        suppliers = await self.supplier_repo.list(skip=skip, limit=limit, category=category)
        total = await self.supplier_repo.count(category=category)
        return [SupplierResponse.model_validate(s) for s in suppliers], total

    async def update_supplier(
        self,
        supplier_id: UUID,
        supplier_data: SupplierUpdate,
    ) -> Optional[SupplierResponse]:
        """Update a supplier."""
        if not await self.supplier_repo.exists(supplier_id):
            return None
        updated = await self.supplier_repo.update(
            supplier_id, **supplier_data.model_dump(exclude_unset=True)
        )
        await self.commit_and_refresh(updated)
        return SupplierResponse.model_validate(updated)

    async def delete_supplier(self, supplier_id: UUID) -> bool:
        """
        Delete a supplier.

        Raises:
            ValueError: purchase orders still reference the supplier
        """
        if not await self.supplier_repo.exists(supplier_id):
            return False
        if await self.supplier_repo.has_purchase_orders(supplier_id):
            raise ValueError("Cannot delete a supplier that has purchase orders")
        deleted = await self.supplier_repo.delete(supplier_id)
        await self.session.commit()
        return deleted
