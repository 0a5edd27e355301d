"""
Staff, subcontractor and supplier API tests.
"""

from decimal import Decimal

import pytest

MISSING_ID = "00000000-0000-0000-0000-000000000000"


async def _create(test_client, path, payload):
    response = await test_client.post(path, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def _create_staff(test_client, **overrides):
    payload = {"name": "Carlos Painter", "role": "Painter", "phone": "555-0111", "skills": ["spraying"]}
    payload.update(overrides)
    return await _create(test_client, "/api/v1/staff", payload)


async def _create_subcontractor(test_client, **overrides):
    payload = {
        "name": "Dana Drywall",
        "company": "Dana Drywall Co",
        "specialty": "Drywall",
        "phone": "555-0122",
        "rate": "45.00",
    }
    payload.update(overrides)
    return await _create(test_client, "/api/v1/subcontractors", payload)


@pytest.mark.asyncio
async def test_staff_crud(test_client):
    staff = await _create_staff(test_client)
    assert staff["availability"] == "available"
    assert staff["skills"] == ["spraying"]

    fetched = await test_client.get(f"/api/v1/staff/{staff['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Carlos Painter"

    updated = await test_client.put(f"/api/v1/staff/{staff['id']}", json={"availability": "on_leave"})
    assert updated.status_code == 200
    assert updated.json()["availability"] == "on_leave"
    assert updated.json()["role"] == "Painter"

    deleted = await test_client.delete(f"/api/v1/staff/{staff['id']}")
    assert deleted.status_code == 204
    assert (await test_client.get(f"/api/v1/staff/{staff['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_list_staff_filters(test_client):
    await _create_staff(test_client)
    await _create_staff(test_client, name="Pat Foreman", role="Foreman", availability="assigned")

    by_role = (await test_client.get("/api/v1/staff", params={"role": "Foreman"})).json()
    by_availability = (await test_client.get("/api/v1/staff", params={"availability": "available"})).json()
    everyone = (await test_client.get("/api/v1/staff")).json()

    assert by_role["total"] == 1
    assert by_role["items"][0]["name"] == "Pat Foreman"
    assert by_availability["total"] == 1
    assert by_availability["items"][0]["name"] == "Carlos Painter"
    assert everyone["total"] == 2


@pytest.mark.asyncio
async def test_staff_validation(test_client):
    missing_phone = await test_client.post("/api/v1/staff", json={"name": "No Phone", "role": "Painter"})
    staff = await _create_staff(test_client)
    nulled = await test_client.put(f"/api/v1/staff/{staff['id']}", json={"role": None})

    assert missing_phone.status_code == 422
    assert nulled.status_code == 422


@pytest.mark.asyncio
async def test_missing_staff_is_404(test_client):
    assert (await test_client.get(f"/api/v1/staff/{MISSING_ID}")).status_code == 404
    assert (await test_client.put(f"/api/v1/staff/{MISSING_ID}", json={"phone": "1"})).status_code == 404
    assert (await test_client.delete(f"/api/v1/staff/{MISSING_ID}")).status_code == 404


@pytest.mark.asyncio
async def test_subcontractor_crud(test_client):
    sub = await _create_subcontractor(test_client)
    assert sub["status"] == "active"
    assert sub["rate_type"] == "hourly"
    assert Decimal(sub["rate"]) == Decimal("45.00")

    updated = await test_client.put(
        f"/api/v1/subcontractors/{sub['id']}",
        json={"status": "inactive", "rate": "50.00", "rate_type": "daily"},
    )
    assert updated.status_code == 200
    assert updated.json()["status"] == "inactive"
    assert updated.json()["rate_type"] == "daily"
    assert updated.json()["specialty"] == "Drywall"

    deleted = await test_client.delete(f"/api/v1/subcontractors/{sub['id']}")
    assert deleted.status_code == 204
    assert (await test_client.get(f"/api/v1/subcontractors/{sub['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_list_subcontractor_filters(test_client):
    await _create_subcontractor(test_client)
    await _create_subcontractor(test_client, name="Eli Electric", specialty="Electrical", status="inactive")

    active = (await test_client.get("/api/v1/subcontractors", params={"status": "active"})).json()
    electrical = (await test_client.get("/api/v1/subcontractors", params={"specialty": "Electrical"})).json()

    assert active["total"] == 1
    assert active["items"][0]["name"] == "Dana Drywall"
    assert electrical["total"] == 1
    assert electrical["items"][0]["status"] == "inactive"


@pytest.mark.asyncio
async def test_subcontractor_rate_cannot_be_negative(test_client):
    response = await test_client.post(
        "/api/v1/subcontractors",
        json={"name": "Cheap", "specialty": "Drywall", "phone": "1", "rate": "-5"},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_missing_subcontractor_is_404(test_client):
    assert (await test_client.get(f"/api/v1/subcontractors/{MISSING_ID}")).status_code == 404
    assert (await test_client.delete(f"/api/v1/subcontractors/{MISSING_ID}")).status_code == 404


@pytest.mark.asyncio
async def test_supplier_crud_and_category_filter(test_client):
    paint = await _create(test_client, "/api/v1/suppliers", {"name": "Coastal Paint Supply", "category": "Paint"})
    await _create(test_client, "/api/v1/suppliers", {"name": "Ladder Depot", "category": "Equipment"})

    by_category = (await test_client.get("/api/v1/suppliers", params={"category": "Paint"})).json()
    assert by_category["total"] == 1
    assert by_category["items"][0]["id"] == paint["id"]

    updated = await test_client.put(
        f"/api/v1/suppliers/{paint['id']}",
        json={"contact_name": "Morgan", "email": "orders@coastalpaint.com"},
    )
    assert updated.status_code == 200
    assert updated.json()["contact_name"] == "Morgan"
    assert updated.json()["category"] == "Paint"

    deleted = await test_client.delete(f"/api/v1/suppliers/{paint['id']}")
    assert deleted.status_code == 204
    assert (await test_client.get(f"/api/v1/suppliers/{paint['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_supplier_with_purchase_orders_cannot_be_deleted(test_client):
    supplier = await _create(test_client, "/api/v1/suppliers", {"name": "Coastal Paint Supply"})
    await _create(
        test_client,
        "/api/v1/purchase-orders",
        {"supplier_id": supplier["id"], "order_date": "2030-03-01", "total_amount": "120.00"},
    )

    response = await test_client.delete(f"/api/v1/suppliers/{supplier['id']}")

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Cannot delete a supplier that has purchase orders"


@pytest.mark.asyncio
async def test_missing_supplier_is_404(test_client):
    assert (await test_client.get(f"/api/v1/suppliers/{MISSING_ID}")).status_code == 404
    assert (await test_client.put(f"/api/v1/suppliers/{MISSING_ID}", json={"notes": "x"})).status_code == 404
    assert (await test_client.delete(f"/api/v1/suppliers/{MISSING_ID}")).status_code == 404
