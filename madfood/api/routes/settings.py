from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException

from madfood.api.dependencies import (
    get_now, get_pantry, get_plans, get_profiles, get_recipes, get_reminder_client, get_shopping
)
from madfood.infra.Pantry_Repository import PantryRepository
from madfood.infra.Plan_Repository import PlanRepository
from madfood.infra.Profile_Repository import ProfileRepository
from madfood.infra.Recipe_Repository import RecipeRepository
from madfood.infra.reminder_client import ReminderClient, send_weekly_reminder
from madfood.infra.Shopping_Repository import ShoppingRepository
from madfood.logic.reminders.preview import build_weekly_reminder_preview
from madfood.utilities.dates import end_of_week
from madfood.utilities.validators import ProfileInput

router = APIRouter(prefix="/api", tags=["settings"])


@router.get("/profile")
def read_profile(profiles: ProfileRepository = Depends(get_profiles)):
    profile = profiles.get()
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not set up yet")
    return profile.to_dict()


@router.put("/profile")
def save_profile(payload: ProfileInput, profiles: ProfileRepository = Depends(get_profiles)):
    return profiles.upsert(payload.model_dump()).to_dict()


def _weekly_preview(now, profiles, plans, recipes, pantry, shopping):
    today = now.date()
    return build_weekly_reminder_preview(
        profile=profiles.get(),
        plans=plans.list_range(today, end_of_week(today)),
        recipes=recipes.list_recipes(),
        shopping_items=shopping.list_items_recent_first(),
        pantry_items=pantry.list_items(),
        today=today,
    )


@router.get("/reminders/preview")
def reminder_preview(now: datetime = Depends(get_now),
                     profiles: ProfileRepository = Depends(get_profiles),
                     plans: PlanRepository = Depends(get_plans),
                     recipes: RecipeRepository = Depends(get_recipes),
                     pantry: PantryRepository = Depends(get_pantry),
                     shopping: ShoppingRepository = Depends(get_shopping)):
    return _weekly_preview(now, profiles, plans, recipes, pantry, shopping).to_dict()


@router.post("/reminders/send")
async def send_reminder(now: datetime = Depends(get_now),
                        profiles: ProfileRepository = Depends(get_profiles),
                        plans: PlanRepository = Depends(get_plans),
                        recipes: RecipeRepository = Depends(get_recipes),
                        pantry: PantryRepository = Depends(get_pantry),
                        shopping: ShoppingRepository = Depends(get_shopping),
                        client: ReminderClient = Depends(get_reminder_client)):
    preview = _weekly_preview(now, profiles, plans, recipes, pantry, shopping)
    result = await send_weekly_reminder(client, preview)
    return {"success": True, "phone_number": preview.phone_number, **result}
