"""
Subcontractor API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.db.session import get_db
from app.controllers.subcontractor_controller import SubcontractorController
from app.models.subcontractor import SubcontractorStatus
from app.schemas.subcontractor import (
    SubcontractorCreate,
    SubcontractorUpdate,
    SubcontractorResponse,
    SubcontractorListResponse,
)

router = APIRouter()


@router.post("", response_model=SubcontractorResponse, status_code=status.HTTP_201_CREATED)
async def create_subcontractor(
    data: SubcontractorCreate,
    db: AsyncSession = Depends(get_db),
) -> SubcontractorResponse:
    """Add a subcontractor."""
    controller = SubcontractorController(db)
    return await controller.create_subcontractor(data)


@router.get("", response_model=SubcontractorListResponse)
async def list_subcontractors(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    status: SubcontractorStatus = Query(None),
    specialty: str = Query(None),
    db: AsyncSession = Depends(get_db),
) -> SubcontractorListResponse:
    """List subcontractors."""
    controller = SubcontractorController(db)
    return await controller.list_subcontractors(
        skip=skip,
        limit=limit,
        status=status,
        specialty=specialty,
    )


@router.get("/{subcontractor_id}", response_model=SubcontractorResponse)
async def get_subcontractor(
    subcontractor_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> SubcontractorResponse:
    """Get subcontractor by ID."""
    controller = SubcontractorController(db)
    subcontractor = await controller.get_subcontractor(subcontractor_id)
    if not subcontractor:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Subcontractor not found",
        )
    return subcontractor


@router.put("/{subcontractor_id}", response_model=SubcontractorResponse)
async def update_subcontractor(
    subcontractor_id: UUID,
    data: SubcontractorUpdate,
    db: AsyncSession = Depends(get_db),
) -> SubcontractorResponse:
    """Update a subcontractor."""
    controller = SubcontractorController(db)
    subcontractor = await controller.update_subcontractor(subcontractor_id, data)
    if not subcontractor:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Subcontractor not found",
        )
    return subcontractor


@router.delete("/{subcontractor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_subcontractor(
    subcontractor_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a subcontractor."""
    controller = SubcontractorController(db)
    deleted = await controller.delete_subcontractor(subcontractor_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Subcontractor not found",
        )
