"""
Client and project API tests.
"""

import pytest

from factories import create_client, create_project, create_quote


@pytest.mark.asyncio
async def test_client_crud(test_client):
    client = await create_client(test_client, classification="commercial")
    assert client["classification"] == "commercial"

    fetched = await test_client.get(f"/api/v1/clients/{client['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["email"] == "jane@paintclient.com"

    updated = await test_client.put(f"/api/v1/clients/{client['id']}", json={"phone": "555-0199"})
    assert updated.status_code == 200
    assert updated.json()["phone"] == "555-0199"
    assert updated.json()["name"] == "Jane Homeowner"

    deleted = await test_client.delete(f"/api/v1/clients/{client['id']}")
    assert deleted.status_code == 204
    assert (await test_client.get(f"/api/v1/clients/{client['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_client_validation(test_client):
    response = await test_client.post(
        "/api/v1/clients",
        json={"name": "No Email", "email": "not-an-email", "phone": "1", "address": "x"},
    )

    assert response.status_code == 422
    assert response.json()["error"]["message"] == "Validation error"


@pytest.mark.asyncio
async def test_list_clients_search_and_filter(test_client):
    await create_client(test_client, name="Acme Offices", email="ops@acmeoffices.com", classification="commercial")
    await create_client(test_client, name="Bob Smith", email="bob@smithhome.com")

    by_search = (await test_client.get("/api/v1/clients", params={"search": "acme"})).json()
    by_class = (await test_client.get("/api/v1/clients", params={"classification": "residential"})).json()

    assert by_search["total"] == 1
    assert by_search["items"][0]["name"] == "Acme Offices"
    assert by_class["total"] == 1
    assert by_class["items"][0]["name"] == "Bob Smith"


@pytest.mark.asyncio
async def test_client_with_projects_cannot_be_deleted(test_client):
    client = await create_client(test_client)
    await create_project(test_client, client["id"])

    response = await test_client.delete(f"/api/v1/clients/{client['id']}")

    assert response.status_code == 400
    assert "still has projects" in response.json()["error"]["message"]


@pytest.mark.asyncio
async def test_project_requires_existing_client(test_client):
    response = await test_client.post(
        "/api/v1/projects",
        json={
            "client_id": "00000000-0000-0000-0000-000000000000",
            "title": "Orphan",
            "address": "Nowhere",
            "service_type": "Interior Painting",
        },
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Client not found"


@pytest.mark.asyncio
async def test_project_dates_must_be_ordered(test_client):
    client = await create_client(test_client)

    create = await test_client.post(
        "/api/v1/projects",
        json={
            "client_id": client["id"],
            "title": "Backwards",
            "address": "1 Main St",
            "service_type": "Interior Painting",
            "start_date": "2030-06-10",
            "due_date": "2030-06-01",
        },
    )
    assert create.status_code == 400

    project = await create_project(test_client, client["id"], start_date="2030-06-01", due_date="2030-06-10")
    update = await test_client.put(f"/api/v1/projects/{project['id']}", json={"due_date": "2030-05-01"})
    assert update.status_code == 400


@pytest.mark.asyncio
async def test_completing_project_sets_completed_date(test_client):
    client = await create_client(test_client)
    project = await create_project(test_client, client["id"])

    response = await test_client.put(f"/api/v1/projects/{project['id']}", json={"status": "completed"})

    assert response.status_code == 200
    assert response.json()["completed_date"] is not None


@pytest.mark.asyncio
async def test_list_projects_filters(test_client):
    client = await create_client(test_client)
    other = await create_client(test_client, name="Other", email="other@paintclient.com")
    await create_project(test_client, client["id"], priority="high")
    await create_project(test_client, other["id"])

    by_client = (await test_client.get("/api/v1/projects", params={"client_id": client["id"]})).json()
    by_priority = (await test_client.get("/api/v1/projects", params={"priority": "high"})).json()

    assert by_client["total"] == 1
    assert by_priority["total"] == 1
    assert by_priority["items"][0]["client_id"] == client["id"]


@pytest.mark.asyncio
async def test_project_with_quote_cannot_be_deleted(test_client):
    client = await create_client(test_client)
    project = await create_project(test_client, client["id"])
    await create_quote(test_client, project["id"])

    response = await test_client.delete(f"/api/v1/projects/{project['id']}")

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_project_assigned_staff_round_trip(test_client):
    staff = await test_client.post(
        "/api/v1/staff",
        json={"name": "Carlos Painter", "role": "Painter", "phone": "555-0111"},
    )
    staff_id = staff.json()["id"]
    client = await create_client(test_client)

    project = await create_project(test_client, client["id"], assigned_staff=[staff_id])

    assert project["assigned_staff"] == [staff_id]


@pytest.mark.asyncio
async def test_required_fields_cannot_be_nulled(test_client):
    client = await create_client(test_client)
    project = await create_project(test_client, client["id"])

    client_response = await test_client.put(f"/api/v1/clients/{client['id']}", json={"name": None})
    project_response = await test_client.put(f"/api/v1/projects/{project['id']}", json={"status": None})

    assert client_response.status_code == 422
    assert "name" in str(client_response.json()["error"]["details"])
    assert project_response.status_code == 422
    assert (await test_client.get(f"/api/v1/clients/{client['id']}")).json()["name"] == "Jane Homeowner"


@pytest.mark.asyncio
async def test_optional_fields_can_be_cleared(test_client):
    client = await create_client(test_client, notes="Gate code 1234")

    response = await test_client.put(f"/api/v1/clients/{client['id']}", json={"notes": None})

    assert response.status_code == 200
    assert response.json()["notes"] is None
