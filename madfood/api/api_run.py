from pathlib import Path
from typing import Optional, Union
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from madfood.api.routes import dashboard, pantry, planner, recipes, settings, shopping
from madfood.events.Event_Bus import EventBus
from madfood.events.web_observers import ActivityFeed
from madfood.infra.json_store import JsonStore
from madfood.infra.Pantry_Repository import PantryRepository
from madfood.infra.Plan_Repository import PlanRepository
from madfood.infra.Profile_Repository import ProfileRepository
from madfood.infra.Recipe_Repository import RecipeRepository
from madfood.infra.reminder_client import ReminderClient
from madfood.infra.Shopping_Repository import ShoppingRepository
from madfood.utilities.config import APP_NAME, DATA_DIR, DEBUG
from madfood.utilities.errors import (
    DataServiceError, RecordNotFound, ReminderDispatchError, ReminderNotConfigured
)

# Logging
logger = logging.getLogger("madfood_app")

DATA_SERVICE_MESSAGE = "Could not reach the data service. Please try again."


def _register_error_handlers(app: FastAPI):
    @app.exception_handler(DataServiceError)
    async def _data_service_error(request: Request, exc: DataServiceError):
        logger.error("Data service failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=502, content={"detail": DATA_SERVICE_MESSAGE})

    @app.exception_handler(RecordNotFound)
    async def _not_found(request: Request, exc: RecordNotFound):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ReminderNotConfigured)
    async def _reminder_not_configured(request: Request, exc: ReminderNotConfigured):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ReminderDispatchError)
    async def _reminder_dispatch_error(request: Request, exc: ReminderDispatchError):
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def _bad_value(request: Request, exc: ValueError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})


def create_app(data_dir: Optional[Union[str, Path]] = None,
               reminder_client: Optional[ReminderClient] = None) -> FastAPI:
    """Build the API with its own store, event bus and repositories.

    Every app instance owns its state, so tests can build one per temporary data directory.
    """
    app = FastAPI(title=f"{APP_NAME} Planner API", debug=DEBUG)

    store = JsonStore(data_dir or DATA_DIR)
    bus = EventBus()
    activity = ActivityFeed().attach(bus)
    pantry_repo = PantryRepository(store, bus)

    app.state.store = store
    app.state.bus = bus
    app.state.activity = activity
    app.state.plans = PlanRepository(store)
    app.state.recipes = RecipeRepository(store)
    app.state.pantry = pantry_repo
    app.state.shopping = ShoppingRepository(store, pantry_repo, bus)
    app.state.profiles = ProfileRepository(store)
    app.state.reminder_client = reminder_client or ReminderClient()

    for module in (planner, recipes, pantry, shopping, dashboard, settings):
        app.include_router(module.router)
    _register_error_handlers(app)

    @app.get("/health")
    def health():
        return {"status": "ok", "app": APP_NAME}

    logger.info("%s API ready, data in %s", APP_NAME, store.data_dir)
    return app


app = create_app()
