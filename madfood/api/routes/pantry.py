from fastapi import APIRouter, Depends

from madfood.api.dependencies import get_pantry
from madfood.infra.Pantry_Repository import PantryRepository
from madfood.logic.pantry.value import pantry_estimated_value
from madfood.utilities.money import format_currency
from madfood.utilities.validators import PantryItemInput

router = APIRouter(prefix="/api/pantry", tags=["pantry"])


@router.get("")
def list_pantry(pantry: PantryRepository = Depends(get_pantry)):
    items = pantry.list_items()
    value = pantry_estimated_value(items)
    return {
        "items": [i.to_dict() for i in items],
        "estimated_value": value,
        "estimated_value_label": format_currency(value),
    }


@router.get("/value")
def pantry_value(pantry: PantryRepository = Depends(get_pantry)):
    value = pantry_estimated_value(pantry.list_items())
    return {"estimated_value": value, "estimated_value_label": format_currency(value)}


@router.post("", status_code=201)
def add_pantry_item(payload: PantryItemInput, pantry: PantryRepository = Depends(get_pantry)):
    return pantry.save(payload.model_dump()).to_dict()


@router.put("/{item_id}")
def edit_pantry_item(item_id: str, payload: PantryItemInput, pantry: PantryRepository = Depends(get_pantry)):
    return pantry.save(dict(payload.model_dump(), id=item_id)).to_dict()


@router.delete("/{item_id}")
def delete_pantry_item(item_id: str, pantry: PantryRepository = Depends(get_pantry)):
    pantry.delete(item_id)
    return {"success": True}
