"""Display label resolution for a planned meal.

Strategies run in order; the first one returning a non-empty label wins:
  1. trimmed meal name
  2. recipe title (only when the row links a recipe)
  3. "Meal planned" when no recipe is linked
  4. "Recipe selected" when the recipe title lookup came back empty
"""
from __future__ import annotations
from typing import Callable, Mapping, Optional, Sequence
from madfood.domain.PlannedMeal import PlannedMeal
from madfood.utilities.constants import MEAL_PLANNED_LABEL, RECIPE_SELECTED_LABEL
from madfood.utilities.text import clean_text

LabelStrategy = Callable[[PlannedMeal, Mapping[str, str]], Optional[str]]


def meal_name_label(meal: PlannedMeal, recipe_titles: Mapping[str, str]) -> Optional[str]:
    return clean_text(meal.meal_name) or None


def recipe_title_label(meal: PlannedMeal, recipe_titles: Mapping[str, str]) -> Optional[str]:
    if not meal.recipe_id:
        return None
    return clean_text(recipe_titles.get(meal.recipe_id)) or None


def unlinked_fallback_label(meal: PlannedMeal, recipe_titles: Mapping[str, str]) -> Optional[str]:
    return None if meal.recipe_id else MEAL_PLANNED_LABEL


def recipe_fallback_label(meal: PlannedMeal, recipe_titles: Mapping[str, str]) -> Optional[str]:
    return RECIPE_SELECTED_LABEL


NEXT_MEAL_LABEL_STRATEGIES: Sequence[LabelStrategy] = (
    meal_name_label,
    recipe_title_label,
    unlinked_fallback_label,
    recipe_fallback_label,
)

# Reminder text prefers the recipe title over a typed-in name
REMINDER_LABEL_STRATEGIES: Sequence[LabelStrategy] = (
    recipe_title_label,
    meal_name_label,
    lambda meal, titles: MEAL_PLANNED_LABEL,
)


def resolve_label(meal: PlannedMeal, recipe_titles: Optional[Mapping[str, str]] = None,
                  strategies: Sequence[LabelStrategy] = NEXT_MEAL_LABEL_STRATEGIES) -> str:
    titles = recipe_titles or {}
    for strategy in strategies:
        label = strategy(meal, titles)
        if label:
            return label
    return MEAL_PLANNED_LABEL
