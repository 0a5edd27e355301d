"""
Project Pydantic schemas for request/response validation.
"""

from datetime import date, datetime
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional, List
from uuid import UUID

from app.schemas.common import UpdateSchema
from app.models.project import ProjectStatus, ProjectPriority


class ProjectBase(BaseModel):
    """Base project schema with common fields."""
    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    address: str = Field(..., min_length=1, max_length=500)
    service_type: str = Field(..., min_length=1, max_length=100)
    status: ProjectStatus = ProjectStatus.PENDING
    priority: ProjectPriority = ProjectPriority.MEDIUM
    progress: int = Field(0, ge=0, le=100)
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    completed_date: Optional[date] = None
    total_cost: Optional[Decimal] = Field(None, ge=0)
    assigned_staff: List[UUID] = []
    images: List[str] = []


class ProjectCreate(ProjectBase):
    """Schema for creating a project."""
    client_id: UUID


class ProjectUpdate(UpdateSchema):
    """Schema for updating a project (all fields optional)."""
    non_nullable = (
        "client_id", "title", "description", "address", "service_type", "status", "priority", "progress",
    )

    client_id: Optional[UUID] = None
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    address: Optional[str] = Field(None, min_length=1, max_length=500)
    service_type: Optional[str] = Field(None, min_length=1, max_length=100)
    status: Optional[ProjectStatus] = None
    priority: Optional[ProjectPriority] = None
    progress: Optional[int] = Field(None, ge=0, le=100)
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    completed_date: Optional[date] = None
    total_cost: Optional[Decimal] = Field(None, ge=0)
    assigned_staff: Optional[List[UUID]] = None
    images: Optional[List[str]] = None


class ProjectResponse(ProjectBase):
    """Schema for project response."""
    id: UUID
    client_id: UUID
    assigned_staff: Optional[List[UUID]] = None
    images: Optional[List[str]] = None
    created_at: datetime

    class Config:
        from_attributes = True


class ProjectListResponse(BaseModel):
    """Schema for project list response."""
    items: List[ProjectResponse]
    total: int
