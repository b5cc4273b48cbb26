"""Recipe ingredient entity: name, free-text quantity, unit, position in the recipe."""
from typing import Optional
from madfood.utilities.text import clean_text, optional_text


class RecipeIngredient:
    def __init__(self, name: str = "", quantity: Optional[str] = None, unit: Optional[str] = None,
                 sort_order: int = 0, recipe_id: Optional[str] = None):
        self.name = name
        # Free text on purpose: "2", "1,5", "a pinch" are all valid user input
        self.quantity = quantity
        self.unit = unit
        self.sort_order = sort_order
        self.recipe_id = recipe_id

    def __str__(self) -> str:
        parts = [p for p in (self.quantity, self.unit, self.name) if p]
        return " ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a RecipeIngredient from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        try:
            sort_order = int(d.get("sort_order") or 0)
        except (TypeError, ValueError):
            sort_order = 0
        return RecipeIngredient(
            name=clean_text(d.get("name")),
            quantity=optional_text(d.get("quantity")),
            unit=optional_text(d.get("unit")),
            sort_order=sort_order,
            recipe_id=optional_text(d.get("recipe_id")),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "sort_order": self.sort_order,
            "recipe_id": self.recipe_id,
        }
