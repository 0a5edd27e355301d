"""
Calendar service.
Merges projects and service orders into a single event feed.
"""

from datetime import date, timedelta
from typing import Iterable, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.cache import AppCache, CALENDAR
from app.services.base_service import BaseService
from app.db.repositories.project_repository import ProjectRepository
from app.db.repositories.service_order_repository import ServiceOrderRepository
from app.models.project import Project
from app.models.service_order import ServiceOrder, AssigneeType
from app.schemas.calendar import CalendarEvent

SERVICE_ORDER_COLOR = "#ff9800"
DEFAULT_PROJECT_COLOR = "#2196f3"

PROJECT_STATUS_COLORS = {
    "pending": "#9e9e9e",
    "quoted": "#ffeb3b",
    "approved": "#8bc34a",
    "preparing": "#03a9f4",
    "in_progress": "#3f51b5",
    "reviewing": "#9c27b0",
    "completed": "#4caf50",
    "archived": "#607d8b",
}


def project_event(project: Project, today: Optional[date] = None) -> CalendarEvent:
    """All-day event spanning the project's start and due dates."""
    start = project.start_date or today or date.today()
    end = project.due_date or start
    if end == start:
        end = end + timedelta(days=1)
    status = project.status.value
    return CalendarEvent(
        id=f"project-{project.id}",
        title=project.title,
        start=start,
        end=end,
        all_day=True,
        color=PROJECT_STATUS_COLORS.get(status, DEFAULT_PROJECT_COLOR),
        type="project",
        project_id=project.id,
        status=status,
        staff_ids=[str(staff_id) for staff_id in (project.assigned_staff or [])],
    )


def service_order_event(order: ServiceOrder, today: Optional[date] = None) -> CalendarEvent:
    """Timed event for a service order, carrying who is assigned."""
    staff_ids = [str(staff_id) for staff_id in (order.assigned_staff or [])]
    subcontractor_ids = [str(sub_id) for sub_id in (order.assigned_subcontractors or [])]
    if order.assigned_to is not None:
        target = staff_ids if order.assigned_type == AssigneeType.STAFF else subcontractor_ids
        if order.assigned_type is not None and str(order.assigned_to) not in target:
            target.append(str(order.assigned_to))

    title = f"Service: {order.project.title}" if order.project else f"Order #{order.id}"
    return CalendarEvent(
        id=f"service-{order.id}",
        title=title,
        start=order.start_date or today or date.today(),
        end=order.end_date,
        all_day=False,
        color=SERVICE_ORDER_COLOR,
        type="service_order",
        project_id=order.project_id,
        status=order.status.value,
        staff_ids=staff_ids,
        subcontractor_ids=subcontractor_ids,
    )


def filter_events(
    events: Iterable[CalendarEvent],
    staff_ids: Optional[List[str]] = None,
    subcontractor_ids: Optional[List[str]] = None,
) -> List[CalendarEvent]:
    """
    Keep service orders assigned to any selected person.

    Project events always pass; the staff and subcontractor filters
    must both match when both are given.
    """
    selected_staff = {str(s) for s in staff_ids or []}
    selected_subs = {str(s) for s in subcontractor_ids or []}
    kept = []
    for event in events:
        if event.type == "service_order":
            if selected_staff and not selected_staff.intersection(event.staff_ids):
                continue
            if selected_subs and not selected_subs.intersection(event.subcontractor_ids):
                continue
        kept.append(event)
    return kept


class CalendarService(BaseService):
    """Service for the calendar feed."""

    def __init__(self, session: AsyncSession, cache: Optional[AppCache] = None):
        from app.deps.di_container import get_container

        self.session = session
        self.project_repo = ProjectRepository(session)
        self.service_order_repo = ServiceOrderRepository(session)
        self.cache = cache or get_container().app_cache()

    async def _load_events(self, start: Optional[date], end: Optional[date]) -> List[CalendarEvent]:
        today = date.today()
        projects = await self.project_repo.list_overlapping(start, end)
        orders = await self.service_order_repo.list_scheduled(start, end)
        return [project_event(p, today) for p in projects] + [service_order_event(o, today) for o in orders]

    async def list_events(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
        staff_ids: Optional[List[str]] = None,
        subcontractor_ids: Optional[List[str]] = None,
    ) -> List[CalendarEvent]:
        """Calendar events inside the optional window, filtered by assignee."""
        if start and end and end < start:
            raise ValueError("End of the calendar window must not be before its start")
        events = await self.cache.get_or_set(
            CALENDAR,
            (start, end),
            lambda: self._load_events(start, end),
        )
        return filter_events(events, staff_ids, subcontractor_ids)
