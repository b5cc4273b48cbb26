"""Pantry helpers: estimated value, name matching and the merge applied when a shopping
item is marked "already have".
"""
from __future__ import annotations
from typing import Any, Iterable, List, Optional
from madfood.domain.PantryItem import PantryItem
from madfood.utilities.money import coerce_amount, line_total, to_two_decimals
from madfood.utilities.text import clean_text, normalize_key

__all__ = [
    "as_pantry_items", "pantry_estimated_value", "find_by_name", "has_in_stock_match",
    "merge_pantry_from_shopping", "sort_pantry_items",
]


def as_pantry_items(rows: Iterable[Any]) -> List[PantryItem]:
    return [r if isinstance(r, PantryItem) else PantryItem.from_dict(r) for r in rows or []]


def pantry_estimated_value(items: Iterable[Any]) -> float:
    """Sum of quantity x estimated price over in-stock items, rounded once."""
    return to_two_decimals(sum(line_total(i.quantity, i.estimated_price)
                               for i in as_pantry_items(items) if i.in_stock))


def find_by_name(items: Iterable[Any], name: str) -> Optional[PantryItem]:
    key = normalize_key(name)
    if not key:
        return None
    for item in as_pantry_items(items):
        if item.key == key:
            return item
    return None


def has_in_stock_match(items: Iterable[Any], name: str) -> bool:
    key = normalize_key(name)
    if not key:
        return False
    return any(i.key == key and i.in_stock for i in as_pantry_items(items))


def merge_pantry_from_shopping(existing: Optional[PantryItem], name: str,
                               quantity: Any, price: Any) -> Optional[PantryItem]:
    """Pantry record to write for a shopping item saved as "already have".

    A match keeps the larger quantity and only takes the incoming price when it is
    positive; either way the item ends up in stock. Returns None for a blank name.
    """
    clean = clean_text(name)
    if not clean:
        return None
    incoming_qty = coerce_amount(quantity)
    incoming_price = coerce_amount(price)
    if existing is None:
        return PantryItem(
            name=clean,
            quantity=to_two_decimals(incoming_qty),
            estimated_price=to_two_decimals(incoming_price),
            in_stock=True,
        )
    return PantryItem(
        id=existing.id,
        name=existing.name,
        unit=existing.unit,
        quantity=to_two_decimals(max(coerce_amount(existing.quantity), incoming_qty)),
        estimated_price=to_two_decimals(incoming_price) if incoming_price > 0 else existing.estimated_price,
        in_stock=True,
    )


def sort_pantry_items(items: Iterable[Any]) -> List[PantryItem]:
    """In-stock first, then by name ignoring case."""
    return sorted(as_pantry_items(items), key=lambda i: (not i.in_stock, i.name.lower()))
