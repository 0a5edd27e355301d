"""
Activity feed tests.
"""

import pytest

from factories import create_client, create_project


@pytest.mark.asyncio
async def test_mutations_are_recorded(test_client):
    client = await create_client(test_client)
    project = await create_project(test_client, client["id"])

    feed = (await test_client.get("/api/v1/activities")).json()

    types = {entry["type"] for entry in feed["items"]}
    assert {"client_created", "project_created"} <= types
    assert feed["total"] == 2
    project_entry = next(e for e in feed["items"] if e["type"] == "project_created")
    assert project_entry["project_id"] == project["id"]
    assert project_entry["client_id"] == client["id"]


@pytest.mark.asyncio
async def test_feed_filters_by_project(test_client):
    client = await create_client(test_client)
    project = await create_project(test_client, client["id"])
    await create_project(test_client, client["id"], title="Kitchen Cabinets")

    feed = (await test_client.get("/api/v1/activities", params={"project_id": project["id"]})).json()

    assert feed["total"] == 1
    assert feed["items"][0]["description"] == "New project created: Exterior Repaint"


@pytest.mark.asyncio
async def test_manual_entry(test_client):
    response = await test_client.post(
        "/api/v1/activities",
        json={"type": "note", "description": "Called client about color samples"},
    )

    assert response.status_code == 201
    assert response.json()["created_at"]
    feed = (await test_client.get("/api/v1/activities")).json()
    assert feed["items"][0]["type"] == "note"
