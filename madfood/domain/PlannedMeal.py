"""PlannedMeal domain entity: one meal assignment for a calendar date in the single "main" slot."""
from datetime import date
from typing import Optional
from madfood.utilities.constants import MAIN_SLOT
from madfood.utilities.dates import parse_iso_date, to_iso_date
from madfood.utilities.money import coerce_amount
from madfood.utilities.text import as_flag, clean_text, optional_text


class PlannedMeal:
    def __init__(self, planned_date: Optional[date] = None, meal_name: Optional[str] = None,
                 recipe_id: Optional[str] = None, already_have_in_pantry: bool = False,
                 purchased: bool = False, estimated_cost: float = 0.0, is_favorite: bool = False,
                 slot: str = MAIN_SLOT, id: str = ""):
        self.id = id
        self.planned_date = planned_date
        self.slot = slot
        self.meal_name = meal_name
        self.recipe_id = recipe_id
        self.already_have_in_pantry = already_have_in_pantry
        self.purchased = purchased
        self.estimated_cost = estimated_cost
        self.is_favorite = is_favorite

    @property
    def iso_date(self) -> str:
        return to_iso_date(self.planned_date) if self.planned_date else ""

    def is_planned(self) -> bool:
        '''A row counts as planned when it names a meal or links a recipe.'''
        return bool(clean_text(self.meal_name)) or bool(self.recipe_id)

    def is_empty(self) -> bool:
        '''Nothing worth storing: the row is deleted instead of saved.'''
        return (not clean_text(self.meal_name) and not self.recipe_id
                and not self.already_have_in_pantry and not self.purchased
                and self.estimated_cost <= 0 and not self.is_favorite)

    def __str__(self) -> str:
        label = clean_text(self.meal_name) or self.recipe_id or "-"
        return f"{self.iso_date} [{self.slot}] {label} (${self.estimated_cost:.2f})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a PlannedMeal from a stored row. Bad dates become None, bad amounts become 0.'''
        d = dict(data) if isinstance(data, dict) else {}
        raw_date = d.get("planned_date")
        planned_date = None
        if isinstance(raw_date, date):
            planned_date = raw_date
        elif isinstance(raw_date, str):
            try:
                planned_date = parse_iso_date(raw_date[:10])
            except ValueError:
                planned_date = None
        return PlannedMeal(
            id=clean_text(d.get("id")),
            planned_date=planned_date,
            slot=clean_text(d.get("slot")) or MAIN_SLOT,
            meal_name=optional_text(d.get("meal_name")),
            recipe_id=optional_text(d.get("recipe_id")),
            already_have_in_pantry=as_flag(d.get("already_have_in_pantry")),
            purchased=as_flag(d.get("purchased")),
            estimated_cost=coerce_amount(d.get("estimated_cost")),
            is_favorite=as_flag(d.get("is_favorite")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "planned_date": self.iso_date,
            "slot": self.slot,
            "meal_name": self.meal_name,
            "recipe_id": self.recipe_id,
            "already_have_in_pantry": self.already_have_in_pantry,
            "purchased": self.purchased,
            "estimated_cost": self.estimated_cost,
            "is_favorite": self.is_favorite,
        }
