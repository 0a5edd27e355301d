"""
Service order detail text tests.
"""

import re
from types import SimpleNamespace

from app.utils.quote_calculator import apply_breakdown, calculate_quote
from app.utils.service_order_text import (
    FALLBACK_DETAILS,
    INCLUDED_SERVICES,
    build_service_order_details,
    materials_summary,
    strip_pricing,
)

DOLLAR = re.compile(r"\$\d")


def _project(**overrides):
    values = {"title": "Exterior Repaint", "service_type": "Exterior Painting", "description": "Two-story home"}
    values.update(overrides)
    return SimpleNamespace(**values)


def _quote(**overrides):
    materials = [
        {"name": "Exterior Paint", "quantity": "10", "unit_price": "45.00", "enabled": True},
        {"name": "Caulk", "quantity": "0", "unit_price": "6.00", "enabled": True},
        {"name": "Stain", "quantity": "2", "unit_price": "30.00", "enabled": False},
    ]
    labor = [{"description": "Siding", "hours": "12.50", "hourly_rate": "40.00", "enabled": True}]
    breakdown = calculate_quote(materials, labor, "100", "20").breakdown
    values = {
        "materials_estimate": materials,
        "labor_estimate": labor,
        "scope_of_work": apply_breakdown("Paint all siding and trim.\nRepair soffit ($150 allowance).", breakdown),
        "notes": "Gate code 1234.\nDeposit of $500.00 received.",
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def test_details_never_contain_prices():
    details = build_service_order_details(_project(), _quote())

    assert not DOLLAR.search(details)
    assert "TOTAL PROJECT COST" not in details
    assert "Project Breakdown:" not in details


def test_details_sections_in_order():
    details = build_service_order_details(_project(), _quote())

    headings = [
        "PROJECT: Exterior Repaint",
        "SERVICE TYPE: Exterior Painting",
        "DESCRIPTION: Two-story home",
        "WORK TO BE PERFORMED:",
        "MATERIALS REQUIRED:",
        "WORK TASKS:",
        "ADDITIONAL WORK DETAILS:",
        "INCLUDED SERVICES:",
        "ADDITIONAL NOTES:",
    ]
    positions = [details.index(heading) for heading in headings]
    assert positions == sorted(positions)


def test_details_list_quantities_and_hours():
    details = build_service_order_details(_project(), _quote())

    assert "• Exterior Paint (Qty: 10)" in details
    assert "• Caulk\n" in details
    assert "Stain" not in details
    assert "• Siding (Est. 12.5 hours)" in details
    assert "Paint all siding and trim." in details
    assert "Gate code 1234." in details
    for service in INCLUDED_SERVICES:
        assert f"• {service}" in details


def test_details_without_project():
    details = build_service_order_details(None, _quote(notes=None))

    assert details.startswith("WORK TO BE PERFORMED:")
    assert "ADDITIONAL NOTES" not in details


def test_details_fallback_never_empty():
    assert build_service_order_details(None, _quote()) != FALLBACK_DETAILS
    assert FALLBACK_DETAILS.startswith("Service order created from quote")


def test_strip_pricing():
    text = "Prep walls.\n• Paint: $1,200.00\nTOTAL PROJECT COST: $1,200.00\nProject Breakdown:\nUse low-VOC paint."

    assert strip_pricing(text) == "Prep walls.\nUse low-VOC paint."
    assert strip_pricing(None) == ""


def test_materials_summary_skips_disabled_lines():
    assert materials_summary(_quote()) == "Exterior Paint x 10\nCaulk"
