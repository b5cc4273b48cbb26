"""Shopping list aggregate and its line items."""
from datetime import datetime
from typing import List, Optional
from madfood.utilities.dates import parse_timestamp
from madfood.utilities.money import coerce_amount
from madfood.utilities.text import as_flag, clean_text, normalize_key


class ShoppingItem:
    def __init__(self, name: str = "", quantity: float = 0.0, price: float = 0.0,
                 already_have_in_pantry: bool = False, purchased: bool = False,
                 purchased_at: Optional[datetime] = None, list_id: str = "", id: str = "",
                 updated_at: Optional[datetime] = None):
        self.id = id
        self.list_id = list_id
        self.name = name
        self.quantity = quantity
        self.price = price
        self.already_have_in_pantry = already_have_in_pantry
        self.purchased = purchased
        self.purchased_at = parse_timestamp(purchased_at)
        self.updated_at = parse_timestamp(updated_at)

    @property
    def key(self) -> str:
        return normalize_key(self.name)

    @property
    def counts_as_spend(self) -> bool:
        return self.purchased and not self.already_have_in_pantry

    def __str__(self) -> str:
        flags = []
        if self.already_have_in_pantry:
            flags.append("have")
        if self.purchased:
            flags.append("bought")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        return f"{self.name} x{self.quantity:g} @ ${self.price:.2f}{suffix}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return ShoppingItem(
            id=clean_text(d.get("id")),
            list_id=clean_text(d.get("list_id")),
            name=clean_text(d.get("name")),
            quantity=coerce_amount(d.get("quantity")),
            price=coerce_amount(d.get("price")),
            already_have_in_pantry=as_flag(d.get("already_have_in_pantry")),
            purchased=as_flag(d.get("purchased")),
            purchased_at=d.get("purchased_at"),
            updated_at=d.get("updated_at"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "list_id": self.list_id,
            "name": self.name,
            "quantity": self.quantity,
            "price": self.price,
            "already_have_in_pantry": self.already_have_in_pantry,
            "purchased": self.purchased,
            "purchased_at": self.purchased_at.isoformat() if self.purchased_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


class ShoppingList:
    def __init__(self, id: str = "", name: str = "", items: Optional[List[ShoppingItem]] = None,
                 updated_at: Optional[datetime] = None):
        self.id = id
        self.name = name
        self.items = items[:] if items else []
        self.updated_at = parse_timestamp(updated_at)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Shopping List {self.name}:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    @staticmethod
    def from_dict(data, items=None):
        d = dict(data) if isinstance(data, dict) else {}
        return ShoppingList(
            id=clean_text(d.get("id")),
            name=clean_text(d.get("name")),
            items=[i if isinstance(i, ShoppingItem) else ShoppingItem.from_dict(i) for i in items or []],
            updated_at=d.get("updated_at"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
