"""
Quote line items.

Material and labor lines are frozen Pydantic models kept in tuples. The
list operations below never mutate their input; they return a new tuple.
"""

from decimal import Decimal
from typing import Any, Iterable, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, Field


class MaterialItem(BaseModel):
    """A material line: quantity of something at a unit price."""
    name: str = Field("", max_length=255)
    quantity: Decimal = Field(Decimal("0"), ge=0)
    unit_price: Decimal = Field(Decimal("0"), ge=0)
    enabled: bool = True

    class Config:
        frozen = True

    @property
    def line_total(self) -> Decimal:
        return self.quantity * self.unit_price


class LaborItem(BaseModel):
    """A labor line: hours of work at an hourly rate."""
    description: str = Field("", max_length=500)
    hours: Decimal = Field(Decimal("0"), ge=0)
    hourly_rate: Decimal = Field(Decimal("0"), ge=0)
    enabled: bool = True

    class Config:
        frozen = True

    @property
    def line_total(self) -> Decimal:
        return self.hours * self.hourly_rate


LineItem = Union[MaterialItem, LaborItem]
ItemT = TypeVar("ItemT", MaterialItem, LaborItem)


def add_item(items: Tuple[ItemT, ...], item: ItemT) -> Tuple[ItemT, ...]:
    """Return a new tuple with item appended."""
    return tuple(items) + (item,)


def update_item(items: Tuple[ItemT, ...], index: int, **changes: Any) -> Tuple[ItemT, ...]:
    """
    Return a new tuple where the item at index has the given fields replaced.

    The changed item is re-validated, so a negative quantity raises
    pydantic.ValidationError just like on creation.

    Raises:
        IndexError: index is outside the list
    """
    items = tuple(items)
    if not -len(items) <= index < len(items):
        raise IndexError(f"Line item index {index} out of range")
    index = index % len(items)
    current = items[index]
    replaced = type(current).model_validate({**current.model_dump(), **changes})
    return items[:index] + (replaced,) + items[index + 1:]


def remove_item(items: Tuple[ItemT, ...], index: int) -> Tuple[ItemT, ...]:
    """
    Return a new tuple without the item at index.

    Raises:
        IndexError: index is outside the list
    """
    items = tuple(items)
    if not -len(items) <= index < len(items):
        raise IndexError(f"Line item index {index} out of range")
    index = index % len(items)
    return items[:index] + items[index + 1:]


def parse_items(raw: Optional[Iterable[Any]], model: Type[ItemT]) -> Tuple[ItemT, ...]:
    """Build a tuple of line items from stored JSON dicts or existing models."""
    if not raw:
        return ()
    return tuple(item if isinstance(item, model) else model.model_validate(item) for item in raw)


def dump_items(items: Iterable[LineItem]) -> list:
    """Serialize line items for a JSON column (decimals become strings)."""
    return [item.model_dump(mode="json") for item in items]
