from pathlib import Path

# Centralized file names for the JSON document store (single source of truth)
PLANS_FILE = 'weekly_plans.json'
RECIPES_FILE = 'recipes.json'
PANTRY_FILE = 'pantry_items.json'
SHOPPING_LISTS_FILE = 'grocery_lists.json'
SHOPPING_ITEMS_FILE = 'grocery_list_items.json'
PROFILE_FILE = 'profile.json'


def collection_path(data_dir: Path, file_name: str) -> Path:
    return (Path(data_dir) / file_name).resolve()


__all__ = ['PLANS_FILE', 'RECIPES_FILE', 'PANTRY_FILE', 'SHOPPING_LISTS_FILE',
           'SHOPPING_ITEMS_FILE', 'PROFILE_FILE', 'collection_path']
