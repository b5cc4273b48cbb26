"""PantryItem domain entity: something the household already has, with a per-unit price estimate."""
from typing import Optional
from madfood.utilities.money import coerce_amount
from madfood.utilities.text import as_flag, clean_text, normalize_key, optional_text


class PantryItem:
    def __init__(self, name: str = "", quantity: float = 0.0, estimated_price: float = 0.0,
                 in_stock: bool = True, unit: Optional[str] = None, id: str = ""):
        self.id = id
        self.name = name
        self.quantity = quantity
        self.unit = unit
        self.estimated_price = estimated_price
        self.in_stock = in_stock

    @property
    def key(self) -> str:
        return normalize_key(self.name)

    def __str__(self) -> str:
        stock = "in stock" if self.in_stock else "out of stock"
        return f"{self.name} - {self.quantity:g} {self.unit or ''} @ ${self.estimated_price:.2f} ({stock})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return PantryItem(
            id=clean_text(d.get("id")),
            name=clean_text(d.get("name")),
            quantity=coerce_amount(d.get("quantity")),
            unit=optional_text(d.get("unit")),
            estimated_price=coerce_amount(d.get("estimated_price")),
            in_stock=as_flag(d.get("in_stock", True)),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "estimated_price": self.estimated_price,
            "in_stock": self.in_stock,
        }
