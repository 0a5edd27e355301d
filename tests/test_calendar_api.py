"""
Calendar feed tests.
"""

from datetime import date

import pytest

from app.schemas.calendar import CalendarEvent
from app.services.calendar_service import filter_events
from factories import create_client, create_project


def _event(type_, staff_ids=(), subcontractor_ids=()):
    return CalendarEvent(
        id=f"{type_}-1",
        title="Event",
        start=date(2030, 5, 1),
        color="#000000",
        type=type_,
        project_id="11111111-1111-1111-1111-111111111111",
        status="pending",
        staff_ids=list(staff_ids),
        subcontractor_ids=list(subcontractor_ids),
    )


def test_filter_keeps_projects_and_matching_orders():
    project = _event("project")
    mine = _event("service_order", staff_ids=["s1"])
    theirs = _event("service_order", staff_ids=["s2"])

    kept = filter_events([project, mine, theirs], staff_ids=["s1"])

    assert kept == [project, mine]


def test_filter_requires_both_selections():
    order = _event("service_order", staff_ids=["s1"], subcontractor_ids=["c1"])

    assert filter_events([order], staff_ids=["s1"], subcontractor_ids=["c2"]) == []
    assert filter_events([order], staff_ids=["s1"], subcontractor_ids=["c1"]) == [order]


def test_filter_without_selection_keeps_everything():
    events = [_event("project"), _event("service_order")]

    assert filter_events(events) == events


@pytest.mark.asyncio
async def test_calendar_events_from_projects_and_orders(test_client):
    staff = (await test_client.post(
        "/api/v1/staff",
        json={"name": "Carlos Painter", "role": "Painter", "phone": "555-0111"},
    )).json()
    client = await create_client(test_client)
    project = await create_project(test_client, client["id"], start_date="2030-05-01", due_date="2030-05-10")
    for assigned in (staff["id"], None):
        payload = {
            "project_id": project["id"],
            "details": "Prep and prime",
            "start_date": "2030-05-02",
            "end_date": "2030-05-03",
        }
        if assigned:
            payload.update(assigned_to=assigned, assigned_type="staff")
        response = await test_client.post("/api/v1/service-orders", json=payload)
        assert response.status_code == 201

    everything = (await test_client.get(
        "/api/v1/calendar/events", params={"start": "2030-05-01", "end": "2030-05-31"}
    )).json()
    filtered = (await test_client.get(
        "/api/v1/calendar/events",
        params={"start": "2030-05-01", "end": "2030-05-31", "staff_ids": [staff["id"]]},
    )).json()

    assert everything["total"] == 3
    types = sorted(event["type"] for event in filtered["items"])
    assert types == ["project", "service_order"]
    order_event = next(e for e in filtered["items"] if e["type"] == "service_order")
    assert order_event["staff_ids"] == [staff["id"]]
    assert order_event["title"] == "Service: Exterior Repaint"


@pytest.mark.asyncio
async def test_calendar_window_excludes_other_dates(test_client):
    client = await create_client(test_client)
    await create_project(test_client, client["id"], start_date="2030-01-01", due_date="2030-01-15")

    response = await test_client.get(
        "/api/v1/calendar/events", params={"start": "2030-05-01", "end": "2030-05-31"}
    )

    assert response.json()["total"] == 0


@pytest.mark.asyncio
async def test_calendar_rejects_inverted_window(test_client):
    response = await test_client.get(
        "/api/v1/calendar/events", params={"start": "2030-05-31", "end": "2030-05-01"}
    )

    assert response.status_code == 400
