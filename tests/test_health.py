"""
Health endpoint tests using pytest-asyncio and httpx.AsyncClient.
"""

import pytest


@pytest.mark.asyncio
async def test_health_endpoint(test_client):
    """Test the health check endpoint returns expected structure."""
    response = await test_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()

    assert "status" in data
    assert "uptime" in data
    assert data["uptime"].startswith("PT")
    assert data["checks"] == {"database": "ok"}
    assert data["status"] == "ok"


@pytest.mark.asyncio
async def test_root_health_endpoint(test_client):
    response = await test_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
