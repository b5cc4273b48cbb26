"""Shopping list money totals and item save normalization.

Provides basket_totals(items), weekly_spend_total(rows, now) and prepare_shopping_item(payload, now).
Line totals are summed unrounded and rounded once per aggregate.
"""
from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional
from madfood.domain.ShoppingList import ShoppingItem
from madfood.utilities.dates import DateLike, parse_timestamp, week_datetime_bounds
from madfood.utilities.money import coerce_amount, line_total, to_two_decimals
from madfood.utilities.text import clean_text

__all__ = ["as_shopping_items", "BasketTotals", "basket_totals", "weekly_spend_total", "prepare_shopping_item"]


def as_shopping_items(rows: Iterable[Any]) -> List[ShoppingItem]:
    return [r if isinstance(r, ShoppingItem) else ShoppingItem.from_dict(r) for r in rows or []]


def _sum_lines(items: Iterable[ShoppingItem]) -> float:
    return sum(line_total(i.quantity, i.price) for i in items)


class BasketTotals:
    def __init__(self, total: float, to_buy: float, purchased: float):
        self.total = total
        self.to_buy = to_buy
        self.purchased = purchased

    def __eq__(self, other):
        if not isinstance(other, BasketTotals):
            return NotImplemented
        return (self.total, self.to_buy, self.purchased) == (other.total, other.to_buy, other.purchased)

    def __repr__(self) -> str:
        return f"BasketTotals(total={self.total}, to_buy={self.to_buy}, purchased={self.purchased})"

    def to_dict(self) -> Dict[str, float]:
        return {"total": self.total, "to_buy_total": self.to_buy, "purchased_total": self.purchased}


def basket_totals(items: Iterable[Any]) -> BasketTotals:
    """Totals for one list.

    total     -> every item
    to_buy    -> items not already in the pantry
    purchased -> purchased items not already in the pantry (a subset of to_buy)
    """
    rows = as_shopping_items(items)
    return BasketTotals(
        total=to_two_decimals(_sum_lines(rows)),
        to_buy=to_two_decimals(_sum_lines(i for i in rows if not i.already_have_in_pantry)),
        purchased=to_two_decimals(_sum_lines(i for i in rows if i.counts_as_spend)),
    )


def weekly_spend_total(rows: Iterable[Any], now: DateLike) -> float:
    """Money spent this week: purchased, not already-have, purchased_at inside the week window."""
    start, end = week_datetime_bounds(now)
    spent = [
        i for i in as_shopping_items(rows)
        if i.counts_as_spend and i.purchased_at is not None and start <= i.purchased_at <= end
    ]
    return to_two_decimals(_sum_lines(spent))


def prepare_shopping_item(payload: Mapping[str, Any], now: datetime,
                          pantry_match: bool = False) -> ShoppingItem:
    """Normalize a shopping item save.

    - name is trimmed and must not be empty (ValueError)
    - quantity and price are clamped and rounded to cents
    - already_have_in_pantry defaults to ``pantry_match`` when the payload leaves it out
    - already-have items are never purchased; purchased items keep their timestamp or get ``now``
    """
    name = clean_text(payload.get("name"))
    if not name:
        raise ValueError("Item name is required")
    raw_have = payload.get("already_have_in_pantry")
    already_have = pantry_match if raw_have is None else bool(raw_have)
    purchased = False if already_have else bool(payload.get("purchased"))
    purchased_at: Optional[datetime] = None
    if purchased:
        purchased_at = parse_timestamp(payload.get("purchased_at")) or now
    return ShoppingItem(
        id=clean_text(payload.get("id")),
        list_id=clean_text(payload.get("list_id")),
        name=name,
        quantity=to_two_decimals(coerce_amount(payload.get("quantity"))),
        price=to_two_decimals(coerce_amount(payload.get("price"))),
        already_have_in_pantry=already_have,
        purchased=purchased,
        purchased_at=purchased_at,
        updated_at=now,
    )
