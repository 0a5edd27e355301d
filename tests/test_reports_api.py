"""
Report summary tests.
"""

from datetime import date
from decimal import Decimal

import pytest

from app.services.report_service import subtract_months
from factories import create_client, create_project, create_quote, set_quote_status


def test_subtract_months_clamps_day():
    assert subtract_months(date(2030, 3, 31), 1) == date(2030, 2, 28)
    assert subtract_months(date(2030, 1, 15), 3) == date(2029, 10, 15)
    assert subtract_months(date(2030, 6, 30), 12) == date(2029, 6, 30)


@pytest.mark.asyncio
async def test_summary_counts_and_revenue(test_client):
    client = await create_client(test_client)
    await create_client(test_client, name="Acme Offices", email="ops@acmeoffices.com", classification="commercial")
    project = await create_project(test_client, client["id"])
    won = await create_quote(test_client, project["id"])
    await set_quote_status(test_client, won["id"], "sent")
    await set_quote_status(test_client, won["id"], "approved")
    await create_quote(test_client, project["id"])

    response = await test_client.get("/api/v1/reports/summary", params={"range": "last_month"})

    assert response.status_code == 200
    summary = response.json()
    assert summary["range"] == "last_month"
    assert summary["new_clients"] == 2
    assert Decimal(summary["total_revenue"]) == Decimal("207.50")
    assert summary["conversion_rate"] == 50.0
    assert len(summary["monthly"]) == 1
    assert Decimal(summary["monthly"][0]["revenue"]) == Decimal("207.50")
    assert summary["monthly"][0]["quotes"] == 2
    distribution = {d["classification"]: d["count"] for d in summary["client_distribution"]}
    assert distribution["residential"] == 1
    assert distribution["commercial"] == 1


@pytest.mark.asyncio
async def test_summary_default_range_has_six_months(test_client):
    summary = (await test_client.get("/api/v1/reports/summary")).json()

    assert summary["range"] == "last_6_months"
    assert len(summary["monthly"]) == 6
    assert summary["new_clients"] == 0
    assert summary["conversion_rate"] == 0.0


@pytest.mark.asyncio
async def test_summary_refreshes_after_mutation(test_client):
    first = (await test_client.get("/api/v1/reports/summary")).json()
    await create_client(test_client)
    second = (await test_client.get("/api/v1/reports/summary")).json()

    assert first["new_clients"] == 0
    assert second["new_clients"] == 1


@pytest.mark.asyncio
async def test_summary_rejects_unknown_range(test_client):
    response = await test_client.get("/api/v1/reports/summary", params={"range": "forever"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_summary_export_is_xlsx(test_client):
    await create_client(test_client)

    response = await test_client.get("/api/v1/reports/summary/export", params={"range": "last_3_months"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    assert "report_last_3_months.xlsx" in response.headers["content-disposition"]
    # xlsx files are zip archives
    assert response.content[:2] == b"PK"
