"""
Subcontractor service with business logic.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import BaseService
from app.services.activity_service import ActivityService
from app.db.repositories.subcontractor_repository import SubcontractorRepository
from app.models.subcontractor import SubcontractorStatus
from app.schemas.subcontractor import SubcontractorCreate, SubcontractorUpdate, SubcontractorResponse


class SubcontractorService(BaseService):
    """Service for subcontractor operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.subcontractor_repo = SubcontractorRepository(session)
        self.activities = ActivityService(session)

    async def create_subcontractor(self, data: SubcontractorCreate) -> SubcontractorResponse:
        """Create a subcontractor."""
        subcontractor = await self.subcontractor_repo.create(**data.model_dump())
        await self.activities.record(
            "subcontractor_created", f"Subcontractor added: {subcontractor.name}"
        )
        await self.commit_and_refresh(subcontractor)
        return SubcontractorResponse.model_validate(subcontractor)

    async def get_subcontractor(self, subcontractor_id: UUID) -> Optional[SubcontractorResponse]:
        """Get subcontractor by ID."""
        subcontractor = await self.subcontractor_repo.get(subcontractor_id)
        if not subcontractor:
            return None
        return SubcontractorResponse.model_validate(subcontractor)

    async def list_subcontractors(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[SubcontractorStatus] = None,
        specialty: Optional[str] = None,
    ) -> tuple[List[SubcontractorResponse], int]:
        """List subcontractors with optional filters."""
        filters = {"status": status, "specialty": specialty}
        items = await self.subcontractor_repo.list(skip=skip, limit=limit, **filters)
        total = await self.subcontractor_repo.count(**filters)
        return [SubcontractorResponse.model_validate(s) for s in items], total

    async def update_subcontractor(
        self,
        subcontractor_id: UUID,
        data: SubcontractorUpdate,
    ) -> Optional[SubcontractorResponse]:
        """Update a subcontractor."""
        if not await self.subcontractor_repo.exists(subcontractor_id):
            return None
        updated = await self.subcontractor_repo.update(
            subcontractor_id, **data.model_dump(exclude_unset=True)
        )
        await self.activities.record(
            "subcontractor_updated", f"Subcontractor updated: {updated.name}"
        )
        await self.commit_and_refresh(updated)
        return SubcontractorResponse.model_validate(updated)

    async def delete_subcontractor(self, subcontractor_id: UUID) -> bool:
        """Delete a subcontractor."""
        subcontractor = await self.subcontractor_repo.get(subcontractor_id)
        if not subcontractor:
            return False
        name = subcontractor.name
        deleted = await self.subcontractor_repo.delete(subcontractor_id)
        await self.activities.record("subcontractor_deleted", f"Subcontractor removed: {name}")
        await self.session.commit()
        return deleted
