"""Weekly planner aggregates.

Rows are PlannedMeal objects or raw row dicts as returned by the plan repository.
Every function takes the current day explicitly; nothing here reads the clock.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Mapping, Optional
from madfood.domain.PlannedMeal import PlannedMeal
from madfood.logic.planner.labels import resolve_label
from madfood.utilities.constants import MAIN_SLOT
from madfood.utilities.dates import DateLike, as_date, each_day_of_interval, end_of_week, to_iso_date, week_date_range
from madfood.utilities.money import coerce_amount, to_two_decimals
from madfood.utilities.text import clean_text

__all__ = [
    "as_planned_meals", "is_planned", "weekly_planned_day_count", "next_planned_meal",
    "next_available_planning_date", "weekly_estimated_meal_cost_total", "prepare_plan_for_day",
    "NextPlannedMeal",
]


def as_planned_meals(rows: Iterable[Any]) -> List[PlannedMeal]:
    return [r if isinstance(r, PlannedMeal) else PlannedMeal.from_dict(r) for r in rows or []]


def is_planned(row: PlannedMeal) -> bool:
    return row.is_planned()


def _in_range(meals: List[PlannedMeal], start, end) -> List[PlannedMeal]:
    return [m for m in meals if m.planned_date is not None and start <= m.planned_date <= end]


def weekly_planned_day_count(rows: Iterable[Any], now: DateLike) -> int:
    """Number of distinct days this week with a planned meal."""
    start, end = week_date_range(now)
    meals = _in_range(as_planned_meals(rows), start, end)
    return len({m.planned_date for m in meals if m.is_planned()})


class NextPlannedMeal:
    def __init__(self, planned_date: str, meal_name: str):
        self.planned_date = planned_date
        self.meal_name = meal_name

    def __eq__(self, other):
        if not isinstance(other, NextPlannedMeal):
            return NotImplemented
        return (self.planned_date, self.meal_name) == (other.planned_date, other.meal_name)

    def __repr__(self) -> str:
        return f"NextPlannedMeal({self.planned_date}, {self.meal_name!r})"

    def to_dict(self) -> Dict[str, str]:
        return {"planned_date": self.planned_date, "meal_name": self.meal_name}


def next_planned_meal(rows: Iterable[Any], today: DateLike,
                      recipe_titles: Optional[Mapping[str, str]] = None) -> Optional[NextPlannedMeal]:
    """First planned main-slot meal from today through the end of the week, or None.

    ``recipe_titles`` maps recipe id to title; a missing id simply falls through
    to the literal fallback labels.
    """
    day = as_date(today)
    meals = [m for m in _in_range(as_planned_meals(rows), day, end_of_week(day)) if m.slot == MAIN_SLOT]
    meals.sort(key=lambda m: m.planned_date)
    for meal in meals:
        if meal.is_planned():
            return NextPlannedMeal(meal.iso_date, resolve_label(meal, recipe_titles))
    return None


def next_available_planning_date(rows: Iterable[Any], today: DateLike) -> Optional[str]:
    """First day from today through Saturday without a planned meal (ISO label), or None."""
    day = as_date(today)
    planned_days = {m.planned_date for m in as_planned_meals(rows)
                    if m.planned_date is not None and m.slot == MAIN_SLOT and m.is_planned()}
    for candidate in each_day_of_interval(day, end_of_week(day)):
        if candidate not in planned_days:
            return to_iso_date(candidate)
    return None


def weekly_estimated_meal_cost_total(rows: Iterable[Any], now: DateLike) -> float:
    start, end = week_date_range(now)
    meals = _in_range(as_planned_meals(rows), start, end)
    return to_two_decimals(sum(m.estimated_cost for m in meals if m.slot == MAIN_SLOT))


def prepare_plan_for_day(payload: Mapping[str, Any]) -> PlannedMeal:
    """Normalize a save request for one day.

    The caller deletes the stored row when the result ``is_empty()``, otherwise upserts it
    on (planned_date, slot).
    """
    meal = PlannedMeal.from_dict(payload)
    meal.slot = MAIN_SLOT
    meal.meal_name = clean_text(meal.meal_name) or None
    meal.estimated_cost = coerce_amount(meal.estimated_cost)
    if meal.already_have_in_pantry:
        meal.purchased = False
    return meal
