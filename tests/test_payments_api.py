"""
Outgoing payment and purchase order API tests.
"""

import pytest


@pytest.fixture
async def supplier(test_client):
    response = await test_client.post(
        "/api/v1/suppliers",
        json={"name": "Coastal Paint Supply", "email": "orders@coastalpaint.com", "category": "Paint"},
    )
    assert response.status_code == 201, response.text
    return response.json()


async def _create_purchase_order(test_client, supplier_id, **overrides):
    payload = {"supplier_id": supplier_id, "order_date": "2030-03-01", "total_amount": "480.00"}
    payload.update(overrides)
    response = await test_client.post("/api/v1/purchase-orders", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_purchase_order_number_generated(test_client, supplier):
    generated = await _create_purchase_order(test_client, supplier["id"])
    explicit = await _create_purchase_order(test_client, supplier["id"], order_number="PO-CUSTOM-1")

    assert generated["order_number"]
    assert explicit["order_number"] == "PO-CUSTOM-1"


@pytest.mark.asyncio
async def test_completed_payment_settles_purchase_order(test_client, supplier):
    order = await _create_purchase_order(test_client, supplier["id"], status="received")

    response = await test_client.post(
        "/api/v1/payments",
        json={
            "recipient_type": "supplier",
            "recipient_id": supplier["id"],
            "amount": "480.00",
            "date": "2030-03-05",
            "method": "check",
            "status": "completed",
            "purchase_order_id": order["id"],
        },
    )

    assert response.status_code == 201, response.text
    refreshed = (await test_client.get(f"/api/v1/purchase-orders/{order['id']}")).json()
    assert refreshed["status"] == "paid"


@pytest.mark.asyncio
async def test_pending_payment_leaves_purchase_order(test_client, supplier):
    order = await _create_purchase_order(test_client, supplier["id"], status="sent")

    await test_client.post(
        "/api/v1/payments",
        json={
            "recipient_type": "supplier",
            "recipient_id": supplier["id"],
            "amount": "100.00",
            "date": "2030-03-05",
            "method": "transfer",
            "purchase_order_id": order["id"],
        },
    )

    refreshed = (await test_client.get(f"/api/v1/purchase-orders/{order['id']}")).json()
    assert refreshed["status"] == "sent"


@pytest.mark.asyncio
async def test_payment_to_unknown_recipient_is_400(test_client):
    response = await test_client.post(
        "/api/v1/payments",
        json={
            "recipient_type": "subcontractor",
            "recipient_id": "00000000-0000-0000-0000-000000000000",
            "amount": "50.00",
            "date": "2030-03-05",
            "method": "cash",
        },
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Subcontractor recipient not found"


@pytest.mark.asyncio
async def test_payment_amount_must_be_positive(test_client, supplier):
    response = await test_client.post(
        "/api/v1/payments",
        json={
            "recipient_type": "supplier",
            "recipient_id": supplier["id"],
            "amount": "0",
            "date": "2030-03-05",
            "method": "cash",
        },
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_payments_by_recipient(test_client, supplier):
    staff = (await test_client.post(
        "/api/v1/staff",
        json={"name": "Carlos Painter", "role": "Painter", "phone": "555-0111"},
    )).json()
    for recipient_type, recipient_id in (("supplier", supplier["id"]), ("staff", staff["id"])):
        await test_client.post(
            "/api/v1/payments",
            json={
                "recipient_type": recipient_type,
                "recipient_id": recipient_id,
                "amount": "75.00",
                "date": "2030-03-05",
                "method": "zelle",
            },
        )

    response = await test_client.get("/api/v1/payments", params={"recipient_type": "staff"})

    assert response.json()["total"] == 1
    assert response.json()["items"][0]["recipient_id"] == staff["id"]
