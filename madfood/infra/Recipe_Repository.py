import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional
from uuid import uuid4

from madfood.domain.Recipe import Recipe
from madfood.infra.json_store import JsonStore
from madfood.infra.paths import RECIPES_FILE
from madfood.utilities.constants import FAVORITES_LIMIT
from madfood.utilities.errors import RecordNotFound
from madfood.utilities.text import clean_text, optional_text

logger = logging.getLogger(__name__)


class RecipeRepository:
    def __init__(self, store: JsonStore):
        self.store = store

    def list_recipes(self) -> List[Recipe]:
        """All recipes, most recently updated first."""
        rows = self.store.load_rows(RECIPES_FILE)
        rows.sort(key=lambda r: str(r.get("updated_at") or ""), reverse=True)
        return [Recipe.from_dict(r) for r in rows]

    def get(self, recipe_id: str) -> Optional[Recipe]:
        for r in self.store.load_rows(RECIPES_FILE):
            if r.get("id") == recipe_id:
                return Recipe.from_dict(r)
        return None

    def list_by_ids(self, recipe_ids: Iterable[str]) -> List[Recipe]:
        wanted = {i for i in recipe_ids if i}
        if not wanted:
            return []
        return [Recipe.from_dict(r) for r in self.store.load_rows(RECIPES_FILE) if r.get("id") in wanted]

    def titles_for(self, recipe_ids: Iterable[str]) -> Dict[str, str]:
        return {r.id: r.title for r in self.list_by_ids(recipe_ids)}

    def save(self, payload: Mapping[str, Any], now: datetime) -> Recipe:
        """Insert or update a recipe; its ingredient list is replaced wholesale.

        Ingredients with a blank name are dropped; sort_order follows list position.
        """
        title = clean_text(payload.get("title"))
        if not title:
            raise ValueError("Recipe title is required")
        recipe_id = clean_text(payload.get("id")) or str(uuid4())
        ingredients = []
        for ing in payload.get("ingredients") or []:
            name = clean_text(ing.get("name"))
            if not name:
                continue
            ingredients.append({
                "recipe_id": recipe_id,
                "name": name,
                "quantity": optional_text(ing.get("quantity")),
                "unit": optional_text(ing.get("unit")),
                "sort_order": len(ingredients),
            })
        row = {
            "id": recipe_id,
            "title": title,
            "notes": optional_text(payload.get("notes")),
            "image_url": optional_text(payload.get("image_url")),
            "ingredients": ingredients,
            "updated_at": now.isoformat(),
        }
        with self.store.lock:
            rows = self.store.load_rows(RECIPES_FILE)
            existing = next((r for r in rows if r.get("id") == recipe_id), None)
            if payload.get("id") and existing is None:
                raise RecordNotFound(RECIPES_FILE, recipe_id)
            row["is_favorite"] = bool((existing or {}).get("is_favorite"))
            rows = [r for r in rows if r.get("id") != recipe_id] + [row]
            self.store.save(RECIPES_FILE, rows)
        logger.info("Saved recipe %s (%d ingredients)", title, len(ingredients))
        return Recipe.from_dict(row)

    def set_favorite(self, recipe_id: str, is_favorite: bool) -> Recipe:
        with self.store.lock:
            rows = self.store.load_rows(RECIPES_FILE)
            for row in rows:
                if row.get("id") == recipe_id:
                    row["is_favorite"] = bool(is_favorite)
                    self.store.save(RECIPES_FILE, rows)
                    return Recipe.from_dict(row)
        raise RecordNotFound(RECIPES_FILE, recipe_id)

    def list_favorites(self, limit: int = FAVORITES_LIMIT) -> List[Recipe]:
        """Starred recipes, most recently updated first."""
        return [r for r in self.list_recipes() if r.is_favorite][:limit]

    def delete(self, recipe_id: str) -> None:
        with self.store.lock:
            rows = self.store.load_rows(RECIPES_FILE)
            remaining = [r for r in rows if r.get("id") != recipe_id]
            if len(remaining) == len(rows):
                raise RecordNotFound(RECIPES_FILE, recipe_id)
            self.store.save(RECIPES_FILE, remaining)
