"""
Supplier controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.supplier_service import SupplierService
from app.schemas.supplier import SupplierCreate, SupplierUpdate, SupplierResponse, SupplierListResponse


class SupplierController(BaseController):
    """Controller for supplier operations."""

    def __init__(self, session: AsyncSession):
        self.supplier_service = SupplierService(session)

    async def create_supplier(self, supplier_data: SupplierCreate) -> SupplierResponse:
        return await self.supplier_service.create_supplier(supplier_data)

    async def get_supplier(self, supplier_id: UUID) -> Optional[SupplierResponse]:
        return await self.supplier_service.get_supplier(supplier_id)

    async def list_suppliers(
        self,
        skip: int = 0,
        limit: int = 100,
        category: Optional[str] = None,
    ) -> SupplierListResponse:
        """List suppliers, optionally by category."""
        suppliers, total = await self.supplier_service.list_suppliers(
            skip=skip,
            limit=limit,
            category=category,
        )
        return SupplierListResponse(items=suppliers, total=total)

    async def update_supplier(self, supplier_id: UUID, supplier_data: SupplierUpdate) -> Optional[SupplierResponse]:
        return await self.supplier_service.update_supplier(supplier_id, supplier_data)

    async def delete_supplier(self, supplier_id: UUID) -> bool:
        return await self.supplier_service.delete_supplier(supplier_id)
