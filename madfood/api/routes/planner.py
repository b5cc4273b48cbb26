from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from madfood.api.dependencies import get_now, get_plans, get_recipes
from madfood.events.event_helpers import publish_plan_saved
from madfood.infra.Plan_Repository import PlanRepository
from madfood.infra.Recipe_Repository import RecipeRepository
from madfood.logic.calendar.grid import WEEKDAY_LABELS, build_month_grid, grid_weeks, month_title
from madfood.logic.planner.summary import prepare_plan_for_day, weekly_estimated_meal_cost_total
from madfood.utilities.dates import add_months, parse_iso_date, start_of_month, sub_months, to_iso_date, week_date_range
from madfood.utilities.validators import PlanDayInput

router = APIRouter(prefix="/api", tags=["planner"])


def _parse_iso(value: str):
    try:
        return parse_iso_date(value)
    except ValueError:
        raise HTTPException(status_code=400, detail="Dates must use yyyy-MM-dd")


def _parse_day(value: Optional[str], now: datetime):
    return _parse_iso(value) if value else now.date()


@router.get("/calendar")
def calendar_month(month: Optional[str] = Query(default=None, description="Any day of the month, yyyy-MM-dd"),
                   now: datetime = Depends(get_now),
                   plans: PlanRepository = Depends(get_plans)):
    month_date = start_of_month(_parse_day(month, now))
    cells = build_month_grid(month_date, now)
    by_date = {p.iso_date: p.to_dict() for p in plans.list_for_month(month_date)}
    return {
        "month": to_iso_date(month_date),
        "title": month_title(month_date),
        "previous_month": to_iso_date(sub_months(month_date, 1)),
        "next_month": to_iso_date(add_months(month_date, 1)),
        "weekday_labels": WEEKDAY_LABELS,
        "weeks": [[c.to_dict() for c in week] for week in grid_weeks(cells)],
        "plans": by_date,
    }


@router.get("/plans")
def list_plans(month: Optional[str] = Query(default=None),
               now: datetime = Depends(get_now),
               plans: PlanRepository = Depends(get_plans)):
    month_date = _parse_day(month, now)
    return {"plans": [p.to_dict() for p in plans.list_for_month(month_date)]}


@router.get("/plans/favorites")
def list_favorite_plans(plans: PlanRepository = Depends(get_plans),
                        recipes: RecipeRepository = Depends(get_recipes)):
    favorites = plans.list_favorites()
    titles = recipes.titles_for(p.recipe_id for p in favorites)
    return {"favorites": [dict(p.to_dict(), recipe_title=titles.get(p.recipe_id or "")) for p in favorites]}


@router.get("/plans/week-estimate")
def week_estimate(now: datetime = Depends(get_now), plans: PlanRepository = Depends(get_plans)):
    start, end = week_date_range(now)
    rows = plans.list_range(start, end)
    return {"start": to_iso_date(start), "end": to_iso_date(end),
            "estimated_meal_cost": weekly_estimated_meal_cost_total(rows, now)}


@router.put("/plans/{planned_date}")
def save_plan_for_day(planned_date: str, payload: PlanDayInput, request: Request,
                      plans: PlanRepository = Depends(get_plans)):
    day = _parse_iso(planned_date)
    meal = prepare_plan_for_day(dict(payload.model_dump(), planned_date=to_iso_date(day)))
    stored = plans.save_for_day(meal)
    publish_plan_saved(request.app.state.bus, meal.iso_date, deleted=stored is None)
    return {"planned_date": meal.iso_date, "deleted": stored is None,
            "plan": stored.to_dict() if stored else None}
