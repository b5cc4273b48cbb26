"""This-week summary shown on the dashboard."""
from __future__ import annotations
from typing import Any, Dict, Iterable, Mapping, Optional
from madfood.logic.dashboard.motivation import daily_motivation
from madfood.logic.planner.summary import (
    next_available_planning_date, next_planned_meal, weekly_estimated_meal_cost_total, weekly_planned_day_count
)
from madfood.logic.shopping.totals import weekly_spend_total
from madfood.utilities.dates import DateLike, format_date, to_iso_date
from madfood.utilities.money import format_currency


def build_week_summary(plans: Iterable[Any], purchased_items: Iterable[Any], now: DateLike,
                       recipe_titles: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Fold already-fetched week rows into the dashboard payload.

    ``plans`` must cover the whole current week (Sunday..Saturday); the next-meal and
    next-free-day projections only look from ``now`` forward.
    """
    rows = list(plans or [])
    spend = weekly_spend_total(purchased_items, now)
    estimate = weekly_estimated_meal_cost_total(rows, now)
    next_meal = next_planned_meal(rows, now, recipe_titles)
    return {
        "today": to_iso_date(now),
        "today_label": format_date(now, "EEEE, MMM d"),
        "planned_days": weekly_planned_day_count(rows, now),
        "next_planned_meal": next_meal.to_dict() if next_meal else None,
        "next_available_planning_date": next_available_planning_date(rows, now),
        "week_spend": spend,
        "week_spend_label": format_currency(spend),
        "week_estimated_meal_cost": estimate,
        "week_estimated_meal_cost_label": format_currency(estimate),
        "motivation": daily_motivation(now),
    }
