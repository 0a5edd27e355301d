"""
Service order API tests.
"""

import pytest

from factories import create_client, create_project


@pytest.fixture
async def project(test_client):
    client = await create_client(test_client)
    return await create_project(test_client, client["id"])


async def _create_order(test_client, project_id, **overrides):
    payload = {"project_id": project_id, "details": "Paint the living room walls."}
    payload.update(overrides)
    response = await test_client.post("/api/v1/service-orders", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_service_order_crud(test_client, project):
    order = await _create_order(test_client, project["id"], safety_requirements="Ladders tied off")
    assert order["status"] == "pending"

    updated = await test_client.put(
        f"/api/v1/service-orders/{order['id']}",
        json={"status": "in_progress", "special_instructions": "Use back entrance"},
    )
    assert updated.status_code == 200
    assert updated.json()["status"] == "in_progress"

    listed = (await test_client.get("/api/v1/service-orders", params={"status": "in_progress"})).json()
    assert listed["total"] == 1

    deleted = await test_client.delete(f"/api/v1/service-orders/{order['id']}")
    assert deleted.status_code == 204
    assert (await test_client.get(f"/api/v1/service-orders/{order['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_service_order_rejects_unknown_supervisor(test_client, project):
    response = await test_client.post(
        "/api/v1/service-orders",
        json={
            "project_id": project["id"],
            "details": "Work",
            "supervisor_id": "00000000-0000-0000-0000-000000000000",
        },
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Supervisor not found"


@pytest.mark.asyncio
async def test_signature_is_captured_once(test_client, project):
    order = await _create_order(test_client, project["id"])

    signed = await test_client.post(
        f"/api/v1/service-orders/{order['id']}/signature",
        json={"signature": "data:image/png;base64,iVBORw0KGgo="},
    )
    assert signed.status_code == 200
    assert signed.json()["client_signature"].startswith("data:image/png")
    assert signed.json()["signed_date"] is not None

    again = await test_client.post(
        f"/api/v1/service-orders/{order['id']}/signature",
        json={"signature": "data:image/png;base64,AAAA"},
    )
    assert again.status_code == 400


@pytest.mark.asyncio
async def test_service_order_pdf(test_client, project):
    staff = (await test_client.post(
        "/api/v1/staff",
        json={"name": "Carlos Painter", "role": "Painter", "phone": "555-0111"},
    )).json()
    order = await _create_order(
        test_client,
        project["id"],
        assigned_to=staff["id"],
        assigned_type="staff",
        materials_required="Paint x 3",
    )

    unsigned = await test_client.get(f"/api/v1/service-orders/{order['id']}/pdf")
    assert unsigned.status_code == 200
    assert unsigned.headers["content-type"] == "application/pdf"
    assert unsigned.content.startswith(b"%PDF")

    await test_client.post(
        f"/api/v1/service-orders/{order['id']}/signature",
        json={"signature": "data:image/png;base64,not-an-image"},
    )
    signed = await test_client.get(f"/api/v1/service-orders/{order['id']}/pdf")
    assert signed.status_code == 200
    assert signed.content.startswith(b"%PDF")


@pytest.mark.asyncio
async def test_missing_service_order_pdf_is_404(test_client):
    response = await test_client.get("/api/v1/service-orders/00000000-0000-0000-0000-000000000000/pdf")

    assert response.status_code == 404
