"""
Subcontractor controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.subcontractor_service import SubcontractorService
from app.models.subcontractor import SubcontractorStatus
from app.schemas.subcontractor import (
    SubcontractorCreate,
    SubcontractorUpdate,
    SubcontractorResponse,
    SubcontractorListResponse,
)


class SubcontractorController(BaseController):
    """Controller for subcontractor operations."""

    def __init__(self, session: AsyncSession):
        self.subcontractor_service = SubcontractorService(session)

    async def create_subcontractor(self, data: SubcontractorCreate) -> SubcontractorResponse:
        return await self.subcontractor_service.create_subcontractor(data)

    async def get_subcontractor(self, subcontractor_id: UUID) -> Optional[SubcontractorResponse]:
        return await self.subcontractor_service.get_subcontractor(subcontractor_id)

    async def list_subcontractors(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[SubcontractorStatus] = None,
        specialty: Optional[str] = None,
    ) -> SubcontractorListResponse:
        """List subcontractors with optional filters."""
        items, total = await self.subcontractor_service.list_subcontractors(
            skip=skip,
            limit=limit,
            status=status,
            specialty=specialty,
        )
        return SubcontractorListResponse(items=items, total=total)

    async def update_subcontractor(
        self,
        subcontractor_id: UUID,
        data: SubcontractorUpdate,
    ) -> Optional[SubcontractorResponse]:
        return await self.subcontractor_service.update_subcontractor(subcontractor_id, data)

    async def delete_subcontractor(self, subcontractor_id: UUID) -> bool:
        return await self.subcontractor_service.delete_subcontractor(subcontractor_id)
