"""
Quote API tests: server-side pricing, status lifecycle, conversion and PDF.
"""

import re
from decimal import Decimal

import pytest

from factories import create_client, create_project, create_quote, set_quote_status


@pytest.fixture
async def project(test_client):
    client = await create_client(test_client)
    return await create_project(test_client, client["id"], images=["https://img.test/before.jpg"])


@pytest.mark.asyncio
async def test_calculate_preview(test_client):
    response = await test_client.post(
        "/api/v1/quotes/calculate",
        json={
            "materials_estimate": [{"name": "Paint", "quantity": "10", "unit_price": "5.00"}],
            "labor_estimate": [{"description": "Painting", "hours": "4", "hourly_rate": "25.00"}],
            "additional_costs": "20",
            "profit_margin": "25",
            "scope_of_work": "Paint the house.",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert Decimal(data["total_estimate"]) == Decimal("207.50")
    assert Decimal(data["profit_amount"]) == Decimal("37.50")
    assert data["scope_of_work"].startswith("Paint the house.\n\nProject Breakdown:")
    assert [line["label"] for line in data["lines"]] == ["Paint", "Painting"]


@pytest.mark.asyncio
async def test_calculate_rejects_negative_values(test_client):
    response = await test_client.post(
        "/api/v1/quotes/calculate",
        json={"materials_estimate": [{"name": "Paint", "quantity": "-1", "unit_price": "5"}]},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_calculate_rejects_margin_over_100(test_client):
    response = await test_client.post("/api/v1/quotes/calculate", json={"profit_margin": "150"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_quote_ignores_client_total(test_client, project):
    quote = await create_quote(test_client, project["id"], total_estimate="1.00", status="approved")

    assert Decimal(quote["total_estimate"]) == Decimal("207.50")
    assert quote["status"] == "draft"
    assert quote["valid_until"] is not None
    assert quote["scope_of_work"].startswith("Paint all exterior siding.\n\nProject Breakdown:")
    assert "TOTAL PROJECT COST: $207.50" in quote["scope_of_work"]


@pytest.mark.asyncio
async def test_create_quote_for_unknown_project(test_client):
    response = await test_client.post(
        "/api/v1/quotes",
        json={"project_id": "00000000-0000-0000-0000-000000000000"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Project not found"


@pytest.mark.asyncio
async def test_update_reprices_and_keeps_one_breakdown(test_client, project):
    quote = await create_quote(test_client, project["id"])

    response = await test_client.put(
        f"/api/v1/quotes/{quote['id']}",
        json={"profit_margin": "0"},
    )

    assert response.status_code == 200
    data = response.json()
    assert Decimal(data["total_estimate"]) == Decimal("170.00")
    assert data["scope_of_work"].count("Project Breakdown:") == 1
    assert "Profit" not in data["scope_of_work"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "field", ["profit_margin", "additional_costs", "materials_estimate", "labor_estimate", "scope_of_work"]
)
async def test_update_rejects_null_for_required_fields(test_client, project, field):
    quote = await create_quote(test_client, project["id"])

    response = await test_client.put(f"/api/v1/quotes/{quote['id']}", json={field: None})

    assert response.status_code == 422
    stored = await test_client.get(f"/api/v1/quotes/{quote['id']}")
    assert stored.status_code == 200
    assert Decimal(stored.json()["total_estimate"]) == Decimal("207.50")


@pytest.mark.asyncio
async def test_update_can_clear_notes(test_client, project):
    quote = await create_quote(test_client, project["id"], notes="Client prefers mornings")

    response = await test_client.put(f"/api/v1/quotes/{quote['id']}", json={"notes": None})

    assert response.status_code == 200
    assert response.json()["notes"] is None


@pytest.mark.asyncio
async def test_pricing_inputs_are_limited_to_cents(test_client, project):
    created = await test_client.post(
        "/api/v1/quotes",
        json={"project_id": project["id"], "profit_margin": "12.345"},
    )
    quote = await create_quote(test_client, project["id"])
    updated = await test_client.put(f"/api/v1/quotes/{quote['id']}", json={"additional_costs": "1.005"})

    assert created.status_code == 422
    assert updated.status_code == 422


@pytest.mark.asyncio
async def test_scope_only_edit_keeps_total(test_client, project):
    quote = await create_quote(
        test_client,
        project["id"],
        materials_estimate=[{"name": "Premium Paint", "quantity": "1", "unit_price": "10000"}],
        labor_estimate=[],
        additional_costs="0",
        profit_margin="12.35",
    )
    assert Decimal(quote["total_estimate"]) == Decimal("11235.00")

    response = await test_client.put(f"/api/v1/quotes/{quote['id']}", json={"scope_of_work": "New scope"})

    assert response.status_code == 200
    assert Decimal(response.json()["total_estimate"]) == Decimal("11235.00")
    assert Decimal(response.json()["profit_margin"]) == Decimal("12.35")


@pytest.mark.asyncio
async def test_status_lifecycle_updates_project(test_client, project):
    quote = await create_quote(test_client, project["id"])

    sent = await set_quote_status(test_client, quote["id"], "sent")
    assert sent.status_code == 200
    assert sent.json()["sent_date"] is not None
    assert (await test_client.get(f"/api/v1/projects/{project['id']}")).json()["status"] == "quoted"

    approved = await set_quote_status(test_client, quote["id"], "approved")
    assert approved.status_code == 200
    assert approved.json()["approved_date"] is not None
    assert (await test_client.get(f"/api/v1/projects/{project['id']}")).json()["status"] == "approved"


@pytest.mark.asyncio
async def test_illegal_transitions_are_rejected(test_client, project):
    quote = await create_quote(test_client, project["id"])

    converted = await set_quote_status(test_client, quote["id"], "converted")
    assert converted.status_code == 400

    await set_quote_status(test_client, quote["id"], "approved")
    back_to_draft = await set_quote_status(test_client, quote["id"], "draft")
    assert back_to_draft.status_code == 400
    assert "approved to draft" in back_to_draft.json()["error"]["message"]


@pytest.mark.asyncio
async def test_convert_requires_approved_quote(test_client, project):
    quote = await create_quote(test_client, project["id"])

    response = await test_client.post(f"/api/v1/quotes/{quote['id']}/convert")

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Only approved quotes can be converted to service orders"


@pytest.mark.asyncio
async def test_convert_creates_price_free_service_order(test_client, project):
    quote = await create_quote(
        test_client,
        project["id"],
        notes="Client prefers mornings.\nDeposit $200.00 paid.",
        optional_services=["prep", "warranty"],
    )
    await set_quote_status(test_client, quote["id"], "approved")

    response = await test_client.post(
        f"/api/v1/quotes/{quote['id']}/convert",
        json={"start_date": "2030-05-01", "due_date": "2030-05-10"},
    )

    assert response.status_code == 201
    order = response.json()
    assert order["status"] == "pending"
    assert order["quote_id"] == quote["id"]
    assert order["project_id"] == project["id"]
    assert order["start_date"] == "2030-05-01"
    assert order["before_images"] == ["https://img.test/before.jpg"]
    assert not re.search(r"\$\d", order["details"])
    assert "• Exterior Paint (Qty: 10)" in order["details"]
    assert "• Painting (Est. 4 hours)" in order["details"]
    assert "Client prefers mornings." in order["details"]
    assert order["materials_required"] == "Exterior Paint x 10"

    stored = (await test_client.get(f"/api/v1/quotes/{quote['id']}")).json()
    assert stored["status"] == "converted"

    again = await test_client.post(f"/api/v1/quotes/{quote['id']}/convert")
    assert again.status_code == 400


@pytest.mark.asyncio
async def test_converted_quote_cannot_be_edited_or_deleted(test_client, project):
    quote = await create_quote(test_client, project["id"])
    await set_quote_status(test_client, quote["id"], "approved")
    await test_client.post(f"/api/v1/quotes/{quote['id']}/convert")

    edit = await test_client.put(f"/api/v1/quotes/{quote['id']}", json={"notes": "late change"})
    delete = await test_client.delete(f"/api/v1/quotes/{quote['id']}")

    assert edit.status_code == 400
    assert delete.status_code == 400


@pytest.mark.asyncio
async def test_project_quote_returns_latest(test_client, project):
    assert (await test_client.get(f"/api/v1/projects/{project['id']}/quote")).status_code == 404

    quote = await create_quote(test_client, project["id"])
    response = await test_client.get(f"/api/v1/projects/{project['id']}/quote")

    assert response.status_code == 200
    assert response.json()["id"] == quote["id"]


@pytest.mark.asyncio
async def test_list_quotes_by_status(test_client, project):
    first = await create_quote(test_client, project["id"])
    await create_quote(test_client, project["id"])
    await set_quote_status(test_client, first["id"], "sent")

    response = await test_client.get("/api/v1/quotes", params={"status": "sent"})

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["items"][0]["id"] == first["id"]


@pytest.mark.asyncio
async def test_quote_pdf(test_client, project):
    quote = await create_quote(test_client, project["id"], notes="Two coats.")

    response = await test_client.get(f"/api/v1/quotes/{quote['id']}/pdf")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert "attachment" in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")


@pytest.mark.asyncio
async def test_missing_quote_is_404(test_client):
    missing = "00000000-0000-0000-0000-000000000000"

    assert (await test_client.get(f"/api/v1/quotes/{missing}")).status_code == 404
    assert (await test_client.get(f"/api/v1/quotes/{missing}/pdf")).status_code == 404
    assert (await set_quote_status(test_client, missing, "sent")).status_code == 404
