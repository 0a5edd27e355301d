"""
Staff API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.db.session import get_db
from app.controllers.staff_controller import StaffController
from app.models.staff import StaffAvailability
from app.schemas.staff import (
    StaffCreate,
    StaffUpdate,
    StaffResponse,
    StaffListResponse,
)

router = APIRouter()


@router.post("", response_model=StaffResponse, status_code=status.HTTP_201_CREATED)
async def create_staff(
    staff_data: StaffCreate,
    db: AsyncSession = Depends(get_db),
) -> StaffResponse:
    """Add a staff member."""
    controller = StaffController(db)
    return await controller.create_staff(staff_data)


@router.get("", response_model=StaffListResponse)
async def list_staff(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    availability: StaffAvailability = Query(None),
    role: str = Query(None),
    db: AsyncSession = Depends(get_db),
) -> StaffListResponse:
    """List staff members."""
    controller = StaffController(db)
    return await controller.list_staff(
        skip=skip,
        limit=limit,
        availability=availability,
        role=role,
    )


@router.get("/{staff_id}", response_model=StaffResponse)
async def get_staff(
    staff_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> StaffResponse:
    """Get staff member by ID."""
    controller = StaffController(db)
    member = await controller.get_staff(staff_id)
    if not member:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Staff member not found",
        )
    return member


@router.put("/{staff_id}", response_model=StaffResponse)
async def update_staff(
    staff_id: UUID,
    staff_data: StaffUpdate,
    db: AsyncSession = Depends(get_db),
) -> StaffResponse:
    """Update a staff member."""
    controller = StaffController(db)
    member = await controller.update_staff(staff_id, staff_data)
    if not member:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Staff member not found",
        )
    return member


@router.delete("/{staff_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_staff(
    staff_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a staff member."""
    controller = StaffController(db)
    deleted = await controller.delete_staff(staff_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Staff member not found",
        )
