"""Weekly reminder text.

Provides build_weekly_reminder_preview(...): one line per planned meal from today through
Saturday with its inferred cost, followed by the items still to buy.
"""
from __future__ import annotations
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional
from madfood.domain.Profile import Profile
from madfood.domain.Recipe import Recipe
from madfood.logic.costs.inference import build_price_index, infer_meal_cost
from madfood.logic.planner.labels import REMINDER_LABEL_STRATEGIES, resolve_label
from madfood.logic.planner.summary import as_planned_meals
from madfood.logic.shopping.totals import as_shopping_items
from madfood.utilities.config import APP_NAME, REMINDER_MAX_SHOPPING_LINES
from madfood.utilities.constants import COST_TBD_LABEL, MAIN_SLOT
from madfood.utilities.dates import DateLike, as_date, end_of_week
from madfood.utilities.errors import ReminderNotConfigured
from madfood.utilities.money import line_total
from madfood.utilities.text import clean_text

__all__ = ["ReminderPreview", "build_weekly_reminder_preview"]


class ReminderPreview:
    def __init__(self, phone_number: str, message: str):
        self.phone_number = phone_number
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        return {"phone_number": self.phone_number, "message": self.message}


def _cost_text(amount: float) -> str:
    return f"${amount:.2f}" if amount > 0 else COST_TBD_LABEL


def build_weekly_reminder_preview(profile: Optional[Profile], plans: Iterable[Any], recipes: Iterable[Recipe],
                                  shopping_items: Iterable[Any], pantry_items: Iterable[Any],
                                  today: DateLike, max_shopping_lines: int = REMINDER_MAX_SHOPPING_LINES) -> ReminderPreview:
    if profile is None or not clean_text(profile.phone_number):
        raise ReminderNotConfigured("Add a phone number in settings first.")
    if not profile.text_reminders_enabled:
        raise ReminderNotConfigured("Enable text reminders before sending.")

    day = as_date(today)
    week_end = end_of_week(day)
    meals = [m for m in as_planned_meals(plans)
             if m.slot == MAIN_SLOT and m.planned_date is not None and day <= m.planned_date <= week_end]
    meals.sort(key=lambda m: m.planned_date)

    recipe_list = list(recipes or [])
    titles = {r.id: r.title for r in recipe_list}
    ingredients_by_recipe: Dict[str, List[Any]] = defaultdict(list)
    for r in recipe_list:
        ingredients_by_recipe[r.id].extend(r.ingredients)

    shopping = as_shopping_items(shopping_items)
    price_index = build_price_index(pantry_items, shopping)

    meal_lines = []
    for meal in meals:
        label = resolve_label(meal, titles, REMINDER_LABEL_STRATEGIES)
        cost = infer_meal_cost(meal, ingredients_by_recipe.get(meal.recipe_id or "", []), price_index)
        meal_lines.append(f"- {meal.iso_date}: {label} ({_cost_text(cost)})")
    if not meal_lines:
        meal_lines = ["- No meals planned yet for this week."]

    pending = [i for i in shopping if not i.already_have_in_pantry and not i.purchased][:max_shopping_lines]
    shopping_lines = [f"- {i.name} ({_cost_text(line_total(i.quantity, i.price))})" for i in pending]
    if not shopping_lines:
        shopping_lines = ["- No pending ingredients to shop."]

    first_name = clean_text(profile.display_name) or "there"
    message = "\n".join([
        f"Hi {first_name}, this is your {APP_NAME} reminder for the week.",
        "",
        "Upcoming meals:",
        *meal_lines,
        "",
        "Ingredients to shop:",
        *shopping_lines,
    ])
    return ReminderPreview(clean_text(profile.phone_number), message)
