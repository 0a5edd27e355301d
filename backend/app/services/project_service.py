"""
Project service with business logic.
"""

from typing import List, Optional
from uuid import UUID
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.cache import AppCache, REPORTS, CALENDAR
from app.services.base_service import BaseService
from app.services.activity_service import ActivityService
from app.db.repositories.project_repository import ProjectRepository
from app.db.repositories.client_repository import ClientRepository
from app.db.repositories.quote_repository import QuoteRepository
from app.models.project import ProjectStatus
from app.schemas.project import ProjectCreate, ProjectUpdate, ProjectResponse
from app.schemas.quote import QuoteResponse


class ProjectService(BaseService):
    """Service for project operations."""

    def __init__(self, session: AsyncSession, cache: Optional[AppCache] = None):
        from app.deps.di_container import get_container

        self.session = session
        self.project_repo = ProjectRepository(session)
        self.client_repo = ClientRepository(session)
        self.quote_repo = QuoteRepository(session)
        self.activities = ActivityService(session)
        self.cache = cache or get_container().app_cache()

    @staticmethod
    def _prepare(values: dict, current_start: Optional[date] = None, current_due: Optional[date] = None) -> dict:
        """Normalize JSON columns and check dates."""
        if values.get("assigned_staff") is not None:
            values["assigned_staff"] = [str(staff_id) for staff_id in values["assigned_staff"]]

        start = values.get("start_date", current_start)
        due = values.get("due_date", current_due)
        if start and due and due < start:
            raise ValueError("Due date must be on or after start date")

        if values.get("status") == ProjectStatus.COMPLETED and not values.get("completed_date"):
            values["completed_date"] = date.today()
        return values

    async def create_project(self, project_data: ProjectCreate) -> ProjectResponse:
        """
        Create a new project.

        Raises:
            ValueError: unknown client or inconsistent dates
        """
        project_dict = self._prepare(project_data.model_dump())
        client = await self.client_repo.get(project_dict["client_id"])
        if not client:
            raise ValueError("Client not found")

        project = await self.project_repo.create(**project_dict)
        await self.activities.record(
            "project_created",
            f"New project created: {project.title}",
            project_id=project.id,
            client_id=client.id,
        )
        await self.commit_and_refresh(project)
        self.cache.invalidate(REPORTS, CALENDAR)
        return ProjectResponse.model_validate(project)

    async def get_project(self, project_id: UUID) -> Optional[ProjectResponse]:
        """Get project by ID."""
        project = await self.project_repo.get(project_id)
        if not project:
            return None
        return ProjectResponse.model_validate(project)

    async def get_project_quote(self, project_id: UUID) -> Optional[QuoteResponse]:
        """Latest quote for a project, or None."""
        quote = await self.quote_repo.get_latest_for_project(project_id)
        if not quote:
            return None
        return QuoteResponse.model_validate(quote)

    async def list_projects(
        self,
        skip: int = 0,
        limit: int = 100,
        client_id: Optional[UUID] = None,
        status: Optional[ProjectStatus] = None,
        priority: Optional[str] = None,
    ) -> tuple[List[ProjectResponse], int]:
        """List projects with optional filters."""
        filters = {"client_id": client_id, "status": status, "priority": priority}
        projects = await self.project_repo.list(skip=skip, limit=limit, **filters)
        total = await self.project_repo.count(**filters)
        return [ProjectResponse.model_validate(p) for p in projects], total

    async def update_project(
        self,
        project_id: UUID,
        project_data: ProjectUpdate,
    ) -> Optional[ProjectResponse]:
        """
        Update a project.

        Raises:
            ValueError: unknown client or inconsistent dates
        """
        project = await self.project_repo.get(project_id)
        if not project:
            return None

        update_dict = self._prepare(
            project_data.model_dump(exclude_unset=True),
            current_start=project.start_date,
            current_due=project.due_date,
        )
        if "client_id" in update_dict and not await self.client_repo.exists(update_dict["client_id"]):
            raise ValueError("Client not found")

        previous_status = project.status
        updated = await self.project_repo.update(project_id, **update_dict)
        if updated.status != previous_status:
            description = f"Project {updated.title} moved to {updated.status.value}"
            activity_type = "project_status_changed"
        else:
            description = f"Project updated: {updated.title}"
            activity_type = "project_updated"
        await self.activities.record(
            activity_type, description, project_id=project_id, client_id=updated.client_id
        )
        await self.commit_and_refresh(updated)
        self.cache.invalidate(REPORTS, CALENDAR)
        return ProjectResponse.model_validate(updated)

    async def set_status(self, project_id: UUID, status: ProjectStatus) -> None:
        """Move a project to status as a side effect of another change; no commit."""
        values = {"status": status}
        if status == ProjectStatus.COMPLETED:
            values["completed_date"] = date.today()
        await self.project_repo.update(project_id, **values)
        self.cache.invalidate(REPORTS, CALENDAR)

    async def delete_project(self, project_id: UUID) -> bool:
        """
        Delete a project.

        Raises:
            ValueError: quotes, service orders or invoices still reference it
        """
        project = await self.project_repo.get(project_id)
        if not project:
            return False
        if await self.project_repo.has_dependents(project_id):
            raise ValueError("Cannot delete a project that has quotes, service orders or invoices")

        title, client_id = project.title, project.client_id
        deleted = await self.project_repo.delete(project_id)
        await self.activities.record("project_deleted", f"Project deleted: {title}", client_id=client_id)
        await self.session.commit()
        self.cache.invalidate(REPORTS, CALENDAR)
        return deleted
