"""
Request helpers shared by the API tests.
"""

from httpx import AsyncClient


async def create_client(client: AsyncClient, **overrides) -> dict:
    payload = {
        "name": "Jane Homeowner",
        "email": "jane@paintclient.com",
        "phone": "555-0100",
        "address": "12 Elm Street",
        "classification": "residential",
    }
    payload.update(overrides)
    response = await client.post("/api/v1/clients", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def create_project(client: AsyncClient, client_id: str, **overrides) -> dict:
    payload = {
        "client_id": client_id,
        "title": "Exterior Repaint",
        "description": "Two-story colonial",
        "address": "12 Elm Street",
        "service_type": "Exterior Painting",
    }
    payload.update(overrides)
    response = await client.post("/api/v1/projects", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def create_quote(client: AsyncClient, project_id: str, **overrides) -> dict:
    payload = {
        "project_id": project_id,
        "materials_estimate": [{"name": "Exterior Paint", "quantity": "10", "unit_price": "5.00"}],
        "labor_estimate": [{"description": "Painting", "hours": "4", "hourly_rate": "25.00"}],
        "additional_costs": "20",
        "profit_margin": "25",
        "scope_of_work": "Paint all exterior siding.",
    }
    payload.update(overrides)
    response = await client.post("/api/v1/quotes", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def set_quote_status(client: AsyncClient, quote_id: str, status: str):
    return await client.patch(f"/api/v1/quotes/{quote_id}/status", json={"status": status})
