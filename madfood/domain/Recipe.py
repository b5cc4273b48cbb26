"""Recipe domain entity: title, notes, image link and an ordered ingredient list."""
from typing import List, Optional
from madfood.domain.Ingredient import RecipeIngredient
from madfood.utilities.text import as_flag, clean_text, optional_text


class Recipe:
    def __init__(self, id: str = "", title: str = "", notes: Optional[str] = None,
                 image_url: Optional[str] = None, ingredients: Optional[List[RecipeIngredient]] = None,
                 is_favorite: bool = False, updated_at: Optional[str] = None):
        self.id = id
        self.title = title
        self.notes = notes
        self.image_url = image_url
        self.ingredients = ingredients[:] if ingredients else []
        self.is_favorite = is_favorite
        self.updated_at = updated_at

    def __str__(self) -> str:
        star = " *" if self.is_favorite else ""
        return f"{self.title}{star} - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        ingredients = [RecipeIngredient.from_dict(i) for i in d.get("ingredients") or []]
        ingredients.sort(key=lambda i: i.sort_order)
        return Recipe(
            id=clean_text(d.get("id")),
            title=clean_text(d.get("title")),
            notes=optional_text(d.get("notes")),
            image_url=optional_text(d.get("image_url")),
            ingredients=ingredients,
            is_favorite=as_flag(d.get("is_favorite")),
            updated_at=d.get("updated_at"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "notes": self.notes,
            "image_url": self.image_url,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "is_favorite": self.is_favorite,
            "updated_at": self.updated_at,
        }
