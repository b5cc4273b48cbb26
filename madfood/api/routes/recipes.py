from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException

from madfood.api.dependencies import get_now, get_recipes
from madfood.infra.Recipe_Repository import RecipeRepository
from madfood.utilities.validators import RecipeFavoriteInput, RecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("")
def list_recipes(recipes: RecipeRepository = Depends(get_recipes)):
    items = recipes.list_recipes()
    return {"count": len(items), "recipes": [r.to_dict() for r in items]}


@router.get("/favorites")
def list_favorite_recipes(recipes: RecipeRepository = Depends(get_recipes)):
    return {"favorites": [r.to_dict() for r in recipes.list_favorites()]}


@router.get("/{recipe_id}")
def recipe_detail(recipe_id: str, recipes: RecipeRepository = Depends(get_recipes)):
    recipe = recipes.get(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe.to_dict()


@router.post("", status_code=201)
def create_recipe(payload: RecipeInput, now: datetime = Depends(get_now),
                  recipes: RecipeRepository = Depends(get_recipes)):
    return recipes.save(payload.model_dump(), now).to_dict()


@router.put("/{recipe_id}")
def update_recipe(recipe_id: str, payload: RecipeInput, now: datetime = Depends(get_now),
                  recipes: RecipeRepository = Depends(get_recipes)):
    return recipes.save(dict(payload.model_dump(), id=recipe_id), now).to_dict()


@router.put("/{recipe_id}/favorite")
def toggle_recipe_favorite(recipe_id: str, payload: RecipeFavoriteInput,
                           recipes: RecipeRepository = Depends(get_recipes)):
    return recipes.set_favorite(recipe_id, payload.is_favorite).to_dict()


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: str, recipes: RecipeRepository = Depends(get_recipes)):
    recipes.delete(recipe_id)
    return {"success": True}
