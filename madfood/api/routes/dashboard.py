from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from madfood.api.dependencies import get_activity, get_now, get_plans, get_recipes, get_shopping
from madfood.events.web_observers import ActivityFeed
from madfood.infra.Plan_Repository import PlanRepository
from madfood.infra.Recipe_Repository import RecipeRepository
from madfood.infra.Shopping_Repository import ShoppingRepository
from madfood.logic.dashboard.summary import build_week_summary
from madfood.utilities.dates import week_date_range, week_datetime_bounds

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/dashboard")
def dashboard(now: datetime = Depends(get_now),
              plans: PlanRepository = Depends(get_plans),
              recipes: RecipeRepository = Depends(get_recipes),
              shopping: ShoppingRepository = Depends(get_shopping)):
    week_plans = plans.list_range(*week_date_range(now))
    purchased = shopping.list_purchased_between(*week_datetime_bounds(now))
    titles = recipes.titles_for(p.recipe_id for p in week_plans if p.recipe_id)
    return build_week_summary(week_plans, purchased, now, titles)


@router.get("/activity")
def activity(since: Optional[int] = Query(default=None, ge=0),
             feed: ActivityFeed = Depends(get_activity)):
    return feed.get_events(since)
