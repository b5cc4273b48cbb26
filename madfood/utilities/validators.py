"""
Input validation schemas using Pydantic for request bodies.

Names are required; amounts are never rejected, only clamped (negative, NaN and
garbage become 0).
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from madfood.utilities.money import coerce_amount


def _strip(v):
    if isinstance(v, str):
        return v.strip()
    return v


def _strip_optional(v):
    """Blank strings become None."""
    if isinstance(v, str):
        return v.strip() or None
    return v


class IngredientInput(BaseModel):
    """Schema for a recipe ingredient. Blank names are dropped by RecipeInput."""
    name: str = Field(default="", max_length=100)
    quantity: Optional[str] = Field(default=None, max_length=40)
    unit: Optional[str] = Field(default=None, max_length=20)

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        return _strip(v) if v is not None else ""

    @field_validator('quantity', 'unit', mode='before')
    @classmethod
    def strip_optional(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            v = str(v)
        return _strip_optional(v)


class RecipeInput(BaseModel):
    """Schema for recipe create/update."""
    title: str = Field(..., min_length=1, max_length=200)
    notes: Optional[str] = None
    image_url: Optional[str] = None
    ingredients: List[IngredientInput] = Field(default_factory=list)

    @field_validator('title', mode='before')
    @classmethod
    def strip_title(cls, v):
        return _strip(v)

    @field_validator('notes', 'image_url', mode='before')
    @classmethod
    def strip_optional(cls, v):
        return _strip_optional(v)

    @field_validator('ingredients')
    @classmethod
    def drop_blank_ingredients(cls, v):
        """Ingredients without a name never reach storage."""
        return [ing for ing in v if ing.name]


class RecipeFavoriteInput(BaseModel):
    is_favorite: bool


class PlanDayInput(BaseModel):
    """Schema for saving the main meal of one day."""
    meal_name: Optional[str] = Field(default=None, max_length=200)
    recipe_id: Optional[str] = None
    already_have_in_pantry: bool = False
    purchased: bool = False
    estimated_cost: float = 0.0
    is_favorite: bool = False

    @field_validator('meal_name', 'recipe_id', mode='before')
    @classmethod
    def strip_optional(cls, v):
        return _strip_optional(v)

    @field_validator('estimated_cost', mode='before')
    @classmethod
    def clamp_cost(cls, v):
        return coerce_amount(v)


class PantryItemInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    quantity: float = 0.0
    unit: Optional[str] = Field(default=None, max_length=20)
    estimated_price: float = 0.0
    in_stock: bool = True

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        return _strip(v)

    @field_validator('unit', mode='before')
    @classmethod
    def strip_unit(cls, v):
        return _strip_optional(v)

    @field_validator('quantity', 'estimated_price', mode='before')
    @classmethod
    def clamp_amounts(cls, v):
        return coerce_amount(v)


class ShoppingListInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        return _strip(v)


class ShoppingItemInput(BaseModel):
    """Schema for a shopping item save.

    already_have_in_pantry left out (None) lets the server default it from the pantry.
    """
    name: str = Field(..., min_length=1, max_length=100)
    quantity: float = 0.0
    price: float = 0.0
    already_have_in_pantry: Optional[bool] = None
    purchased: bool = False
    purchased_at: Optional[str] = None

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        return _strip(v)

    @field_validator('quantity', 'price', mode='before')
    @classmethod
    def clamp_amounts(cls, v):
        return coerce_amount(v)


class ProfileInput(BaseModel):
    display_name: Optional[str] = Field(default=None, max_length=100)
    phone_number: Optional[str] = Field(default=None, max_length=32)
    text_reminders_enabled: bool = False

    @field_validator('display_name', 'phone_number', mode='before')
    @classmethod
    def strip_optional(cls, v):
        return _strip_optional(v)
