"""FastAPI dependencies: the current time and the repositories kept on app.state."""
from datetime import datetime

from fastapi import Request

from madfood.infra.Pantry_Repository import PantryRepository
from madfood.infra.Plan_Repository import PlanRepository
from madfood.infra.Profile_Repository import ProfileRepository
from madfood.infra.Recipe_Repository import RecipeRepository
from madfood.infra.reminder_client import ReminderClient
from madfood.infra.Shopping_Repository import ShoppingRepository
from madfood.events.web_observers import ActivityFeed


def get_now() -> datetime:
    """Local wall-clock time, timezone aware. Tests override this dependency."""
    return datetime.now().astimezone()


def get_plans(request: Request) -> PlanRepository:
    return request.app.state.plans


def get_recipes(request: Request) -> RecipeRepository:
    return request.app.state.recipes


def get_pantry(request: Request) -> PantryRepository:
    return request.app.state.pantry


def get_shopping(request: Request) -> ShoppingRepository:
    return request.app.state.shopping


def get_profiles(request: Request) -> ProfileRepository:
    return request.app.state.profiles


def get_reminder_client(request: Request) -> ReminderClient:
    return request.app.state.reminder_client


def get_activity(request: Request) -> ActivityFeed:
    return request.app.state.activity
