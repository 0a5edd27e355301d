"""
Line item list operation tests.
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.utils.line_items import (
    LaborItem,
    MaterialItem,
    add_item,
    dump_items,
    parse_items,
    remove_item,
    update_item,
)


def test_add_item_returns_new_tuple():
    items = (MaterialItem(name="Paint", quantity=1, unit_price=10),)
    added = add_item(items, MaterialItem(name="Tape", quantity=3, unit_price=2))

    assert len(items) == 1
    assert [item.name for item in added] == ["Paint", "Tape"]


def test_update_item_leaves_input_untouched():
    items = (LaborItem(description="Prep", hours=2, hourly_rate=30),)
    updated = update_item(items, 0, hours=Decimal("5"))

    assert items[0].hours == Decimal("2")
    assert updated[0].hours == Decimal("5")
    assert updated[0].line_total == Decimal("150")


def test_update_item_revalidates():
    items = (MaterialItem(name="Paint", quantity=1, unit_price=10),)

    with pytest.raises(ValidationError):
        update_item(items, 0, quantity=-1)


def test_update_and_remove_reject_bad_index():
    items = (MaterialItem(name="Paint"),)

    with pytest.raises(IndexError):
        update_item(items, 3, name="x")
    with pytest.raises(IndexError):
        remove_item(items, 1)


def test_remove_item():
    items = (MaterialItem(name="A"), MaterialItem(name="B"), MaterialItem(name="C"))

    assert [item.name for item in remove_item(items, 1)] == ["A", "C"]
    assert [item.name for item in remove_item(items, -1)] == ["A", "B"]
    assert len(items) == 3


def test_items_are_frozen():
    item = MaterialItem(name="Paint")

    with pytest.raises(ValidationError):
        item.name = "Primer"


def test_negative_values_are_rejected():
    with pytest.raises(ValidationError):
        LaborItem(description="Work", hours=-1, hourly_rate=10)


def test_dump_and_parse_for_json_columns():
    items = (MaterialItem(name="Paint", quantity=Decimal("2.5"), unit_price=Decimal("10.00")),)
    stored = dump_items(items)

    assert stored == [{"name": "Paint", "quantity": "2.5", "unit_price": "10.00", "enabled": True}]
    assert parse_items(stored, MaterialItem) == items
    assert parse_items(None, MaterialItem) == ()
