"""
Staff controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.staff_service import StaffService
from app.models.staff import StaffAvailability
from app.schemas.staff import StaffCreate, StaffUpdate, StaffResponse, StaffListResponse


class StaffController(BaseController):
    """Controller for staff operations."""

    def __init__(self, session: AsyncSession):
        self.staff_service = StaffService(session)

    async def create_staff(self, staff_data: StaffCreate) -> StaffResponse:
        return await self.staff_service.create_staff(staff_data)

    async def get_staff(self, staff_id: UUID) -> Optional[StaffResponse]:
        return await self.staff_service.get_staff(staff_id)

    async def list_staff(
        self,
        skip: int = 0,
        limit: int = 100,
        availability: Optional[StaffAvailability] = None,
        role: Optional[str] = None,
    ) -> StaffListResponse:
        """List staff members with optional filters."""
        members, total = await self.staff_service.list_staff(
            skip=skip,
            limit=limit,
            availability=availability,
            role=role,
        )
        return StaffListResponse(items=members, total=total)

    async def update_staff(self, staff_id: UUID, staff_data: StaffUpdate) -> Optional[StaffResponse]:
        return await self.staff_service.update_staff(staff_id, staff_data)

    async def delete_staff(self, staff_id: UUID) -> bool:
        return await self.staff_service.delete_staff(staff_id)
