from typing import Final

ISO_DATE_FORMAT: Final[str] = "yyyy-MM-dd"
MAIN_SLOT: Final[str] = "main"
WEEK_STARTS_ON: Final[int] = 0  # Sunday

MEAL_PLANNED_LABEL: Final[str] = "Meal planned"
RECIPE_SELECTED_LABEL: Final[str] = "Recipe selected"
COST_TBD_LABEL: Final[str] = "cost TBD"

FAVORITES_LIMIT: Final[int] = 60
ACTIVITY_MAX_EVENTS: Final[int] = 300
