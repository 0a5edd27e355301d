"""
Quote calculator tests.
"""

from decimal import Decimal

import pytest

from app.utils.line_items import LaborItem, MaterialItem
from app.utils.quote_calculator import (
    BREAKDOWN_SENTINEL,
    OPTIONAL_SERVICES,
    apply_breakdown,
    calculate_quote,
    format_money,
)


def _materials(*pairs):
    return [MaterialItem(name=f"Item {i}", quantity=q, unit_price=p) for i, (q, p) in enumerate(pairs, 1)]


def _labor(*pairs):
    return [LaborItem(description=f"Task {i}", hours=h, hourly_rate=r) for i, (h, r) in enumerate(pairs, 1)]


def test_reference_scenario():
    result = calculate_quote(
        _materials(("10", "5.00")),
        _labor(("4", "25.00")),
        additional_costs="20",
        profit_margin="25",
    )

    assert result.materials_subtotal == Decimal("50")
    assert result.labor_subtotal == Decimal("100")
    assert result.base_subtotal == Decimal("150")
    assert result.profit_amount == Decimal("37.5")
    assert result.total_estimate == Decimal("207.50")
    assert result.warnings == ()


def test_labor_only_scenario():
    result = calculate_quote([], _labor(("2", "30")), additional_costs=0, profit_margin=50)

    assert result.total_estimate == Decimal("90.00")


def test_total_rounds_half_up_to_cents():
    # 3.3333 * 10 = 33.333; with 10% margin the raw total is 36.6663
    result = calculate_quote(_materials(("3.3333", "10")), [], additional_costs=0, profit_margin=10)

    assert result.base_subtotal == Decimal("33.3330")
    assert result.total_estimate == Decimal("36.67")


def test_half_cent_rounds_up():
    result = calculate_quote(_materials(("1", "0.005")), [])

    assert result.total_estimate == Decimal("0.01")


def test_line_total_is_exact_product():
    result = calculate_quote(_materials(("2.5", "3.333")), [])

    assert result.lines[0].line_total == Decimal("8.3325")


def test_zero_margin_adds_no_profit():
    result = calculate_quote(_materials(("10", "5")), _labor(("4", "25")), additional_costs="20", profit_margin=0)

    assert result.profit_amount == 0
    assert result.total_estimate == Decimal("170.00")
    assert "Profit" not in result.breakdown


def test_empty_items_total_is_additional_costs():
    result = calculate_quote([], [], additional_costs="45.5", profit_margin="30")

    assert result.base_subtotal == 0
    assert result.profit_amount == 0
    assert result.total_estimate == Decimal("45.50")


@pytest.mark.parametrize(
    "field, low, high",
    [
        ("quantity", "1", "2"),
        ("unit_price", "3", "4"),
        ("hours", "1", "5"),
        ("hourly_rate", "20", "21"),
        ("additional_costs", "0", "10"),
        ("profit_margin", "10", "15"),
    ],
)
def test_total_never_decreases_when_an_input_grows(field, low, high):
    def total(value):
        material = {"name": "Paint", "quantity": "2", "unit_price": "10"}
        labor = {"description": "Work", "hours": "3", "hourly_rate": "40"}
        extra = {"additional_costs": "5", "profit_margin": "20"}
        if field in material:
            material[field] = value
        elif field in labor:
            labor[field] = value
        else:
            extra[field] = value
        return calculate_quote([material], [labor], **extra).total_estimate

    assert total(high) >= total(low)


def test_disabled_lines_are_excluded():
    items = [
        MaterialItem(name="Paint", quantity=2, unit_price=10),
        MaterialItem(name="Stain", quantity=5, unit_price=10, enabled=False),
    ]
    result = calculate_quote(items, [])

    assert result.materials_subtotal == Decimal("20")
    assert "Stain" not in result.breakdown


def test_accepts_stored_json_dicts():
    result = calculate_quote(
        [{"name": "Paint", "quantity": "10", "unit_price": "5.00", "enabled": True}],
        [{"description": "Painting", "hours": "4", "hourly_rate": "25.00"}],
        "20",
        "25",
    )

    assert result.total_estimate == Decimal("207.50")


@pytest.mark.parametrize("bad", [None, "abc", float("nan"), float("inf"), True])
def test_invalid_numbers_are_coerced_to_zero_with_warning(bad):
    result = calculate_quote([{"name": "Paint", "quantity": bad, "unit_price": "10"}], [])

    assert result.materials_subtotal == 0
    assert result.total_estimate == Decimal("0.00")
    assert len(result.warnings) == 1
    assert "Paint quantity" in result.warnings[0]


def test_unknown_optional_service_warns():
    result = calculate_quote([], [], optional_services=["prep", "gold-leaf"])

    assert any("gold-leaf" in w for w in result.warnings)
    assert OPTIONAL_SERVICES["prep"] in result.breakdown


def test_breakdown_layout():
    result = calculate_quote(
        _materials(("10", "5.00")),
        _labor(("4", "25.00")),
        additional_costs="20",
        profit_margin="25",
        optional_services=["primer", "warranty"],
    )

    assert result.breakdown == (
        "Project Breakdown:\n\n"
        "• Item 1: $50.00\n"
        "• Task 1: $100.00\n"
        "\nMaterials Subtotal: $50.00\n"
        "Labor Subtotal: $100.00\n"
        "Additional Costs: $20.00\n"
        "Profit (25%): $37.50\n"
        "\nTOTAL PROJECT COST: $207.50"
        "\n\nAdditional Services:"
        f"\n• {OPTIONAL_SERVICES['primer']}"
        f"\n• {OPTIONAL_SERVICES['warranty']}"
    )


def test_unnamed_lines_get_positional_labels():
    result = calculate_quote([{"quantity": "1", "unit_price": "2"}], [{"hours": "1", "hourly_rate": "3"}])

    assert [line.label for line in result.lines] == ["Material 1", "Labor 1"]


def test_apply_breakdown_is_idempotent():
    breakdown = calculate_quote(_materials(("10", "5")), []).breakdown
    once = apply_breakdown("Paint the fence.", breakdown)
    twice = apply_breakdown(once, breakdown)

    assert once == twice
    assert once.startswith("Paint the fence.\n\n" + BREAKDOWN_SENTINEL)
    assert once.count(BREAKDOWN_SENTINEL) == 1


def test_apply_breakdown_replaces_stale_breakdown():
    old = apply_breakdown("Scope.", calculate_quote(_materials(("1", "5")), []).breakdown)
    new = apply_breakdown(old, calculate_quote(_materials(("2", "5")), []).breakdown)

    assert "$10.00" in new
    assert "$5.00" not in new


def test_apply_breakdown_on_empty_scope():
    breakdown = calculate_quote([], []).breakdown

    assert apply_breakdown("", breakdown) == breakdown
    assert apply_breakdown(None, breakdown) == breakdown


def test_format_money():
    assert format_money(Decimal("1234")) == "$1,234.00"
    assert format_money(Decimal("0.125")) == "$0.13"
