"""Meal cost inference from recipe ingredients and known unit prices.

Unit prices come from the pantry first and then from shopping items (most recently
updated first); the first positive price seen for a name wins.
"""
from __future__ import annotations
import math
import re
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Mapping, Optional
from madfood.domain.Ingredient import RecipeIngredient
from madfood.domain.PantryItem import PantryItem
from madfood.domain.PlannedMeal import PlannedMeal
from madfood.domain.ShoppingList import ShoppingItem
from madfood.utilities.money import coerce_amount, to_two_decimals
from madfood.utilities.text import normalize_key

__all__ = ["build_price_index", "parse_numeric_quantity", "infer_meal_cost", "ingredient_line_cost"]

_LEADING_NUMBER = re.compile(r'^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')
_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def build_price_index(pantry_items: Iterable[Any] = (), shopping_items: Iterable[Any] = ()) -> Dict[str, float]:
    index: Dict[str, float] = {}
    pantry = [p if isinstance(p, PantryItem) else PantryItem.from_dict(p) for p in pantry_items or []]
    for item in pantry:
        key = item.key
        if key and key not in index and item.estimated_price > 0:
            index[key] = item.estimated_price
    shopping = [s if isinstance(s, ShoppingItem) else ShoppingItem.from_dict(s) for s in shopping_items or []]
    # sorted() is stable, so rows without updated_at keep their incoming order at the end
    shopping = sorted(shopping, key=lambda s: s.updated_at or _OLDEST, reverse=True)
    for item in shopping:
        key = item.key
        if key and key not in index and item.price > 0:
            index[key] = item.price
    return index


def parse_numeric_quantity(value: Optional[str]) -> float:
    """Leading decimal number of a free-text quantity; 1 when empty, unparsable or not positive.

    "2" -> 2.0, "1,5" -> 1.5, "2 cups" -> 2.0, "a pinch" -> 1.0
    """
    if value is None:
        return 1.0
    text = str(value).replace(",", ".", 1)
    if not text.strip():
        return 1.0
    match = _LEADING_NUMBER.match(text)
    if not match:
        return 1.0
    try:
        parsed = float(match.group(0))
    except ValueError:
        return 1.0
    if not math.isfinite(parsed) or parsed <= 0:
        return 1.0
    return parsed


def ingredient_line_cost(ingredient: Any, price_index: Mapping[str, float]) -> float:
    ing = ingredient if isinstance(ingredient, RecipeIngredient) else RecipeIngredient.from_dict(ingredient)
    price = coerce_amount(price_index.get(normalize_key(ing.name)))
    if not price:
        return 0.0
    return price * parse_numeric_quantity(ing.quantity)


def infer_meal_cost(meal: Any, recipe_ingredients: Iterable[Any], price_index: Mapping[str, float]) -> float:
    """Sum of matched ingredient costs; the meal's stored estimate when nothing matched.

    A partially priced recipe returns only the matched part; the stored estimate is used
    solely when the inferred sum is zero.
    """
    planned = meal if isinstance(meal, PlannedMeal) else PlannedMeal.from_dict(meal)
    inferred = 0.0
    if planned.recipe_id:
        inferred = sum(ingredient_line_cost(i, price_index) for i in recipe_ingredients or [])
    if inferred > 0:
        return to_two_decimals(inferred)
    return to_two_decimals(planned.estimated_cost)
