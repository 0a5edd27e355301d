"""
Staff service with business logic.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import BaseService
from app.services.activity_service import ActivityService
from app.db.repositories.staff_repository import StaffRepository
from app.models.staff import StaffAvailability
from app.schemas.staff import StaffCreate, StaffUpdate, StaffResponse


class StaffService(BaseService):
    """Service for staff operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.staff_repo = StaffRepository(session)
        self.activities = ActivityService(session)

    async def create_staff(self, staff_data: StaffCreate) -> StaffResponse:
        """Create a staff member."""
        staff = await self.staff_repo.create(**staff_data.model_dump())
        await self.activities.record("staff_created", f"Staff member added: {staff.name}")
        await self.commit_and_refresh(staff)
        return StaffResponse.model_validate(staff)

    async def get_staff(self, staff_id: UUID) -> Optional[StaffResponse]:
        """Get staff member by ID."""
        staff = await self.staff_repo.get(staff_id)
        if not staff:
            return None
        return StaffResponse.model_validate(staff)

    async def list_staff(
        self,
        skip: int = 0,
        limit: int = 100,
        availability: Optional[StaffAvailability] = None,
        role: Optional[str] = None,
    ) -> tuple[List[StaffResponse], int]:
        """List staff with optional filters."""
        filters = {"availability": availability, "role": role}
        staff = await self.staff_repo.list(skip=skip, limit=limit, **filters)
        total = await self.staff_repo.count(**filters)
        return [StaffResponse.model_validate(s) for s in staff], total

    async def update_staff(self, staff_id: UUID, staff_data: StaffUpdate) -> Optional[StaffResponse]:
        """Update a staff member."""
        if not await self.staff_repo.exists(staff_id):
            return None
        updated = await self.staff_repo.update(staff_id, **staff_data.model_dump(exclude_unset=True))
        await self.activities.record("staff_updated", f"Staff member updated: {updated.name}")
        await self.commit_and_refresh(updated)
        return StaffResponse.model_validate(updated)

    async def delete_staff(self, staff_id: UUID) -> bool:
        """Delete a staff member."""
        staff = await self.staff_repo.get(staff_id)
        if not staff:
            return False
        name = staff.name
        deleted = await self.staff_repo.delete(staff_id)
        await self.activities.record("staff_deleted", f"Staff member removed: {name}")
        await self.session.commit()
        return deleted
