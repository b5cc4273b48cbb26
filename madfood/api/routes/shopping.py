from datetime import datetime

from fastapi import APIRouter, Depends

from madfood.api.dependencies import get_now, get_shopping
from madfood.domain.ShoppingList import ShoppingList
from madfood.infra.Shopping_Repository import ShoppingRepository
from madfood.logic.shopping.totals import basket_totals, weekly_spend_total
from madfood.utilities.dates import week_datetime_bounds, week_timestamp_bounds
from madfood.utilities.validators import ShoppingItemInput, ShoppingListInput

router = APIRouter(prefix="/api", tags=["shopping"])


def _list_payload(shopping_list: ShoppingList):
    payload = shopping_list.to_dict()
    payload["items"] = [i.to_dict() for i in shopping_list.items]
    payload.update(basket_totals(shopping_list.items).to_dict())
    return payload


@router.get("/shopping-lists")
def list_shopping_lists(shopping: ShoppingRepository = Depends(get_shopping)):
    return {"lists": [_list_payload(l) for l in shopping.list_lists()]}


@router.post("/shopping-lists", status_code=201)
def create_shopping_list(payload: ShoppingListInput, now: datetime = Depends(get_now),
                         shopping: ShoppingRepository = Depends(get_shopping)):
    return _list_payload(shopping.create_list(payload.name, now))


@router.get("/shopping-lists/{list_id}")
def shopping_list_detail(list_id: str, shopping: ShoppingRepository = Depends(get_shopping)):
    return _list_payload(shopping.get_list(list_id))


@router.put("/shopping-lists/{list_id}")
def rename_shopping_list(list_id: str, payload: ShoppingListInput, now: datetime = Depends(get_now),
                         shopping: ShoppingRepository = Depends(get_shopping)):
    shopping.rename_list(list_id, payload.name, now)
    return _list_payload(shopping.get_list(list_id))


@router.delete("/shopping-lists/{list_id}")
def delete_shopping_list(list_id: str, shopping: ShoppingRepository = Depends(get_shopping)):
    shopping.delete_list(list_id)
    return {"success": True}


@router.post("/shopping-lists/{list_id}/items", status_code=201)
def add_shopping_item(list_id: str, payload: ShoppingItemInput, now: datetime = Depends(get_now),
                      shopping: ShoppingRepository = Depends(get_shopping)):
    return shopping.save_item(dict(payload.model_dump(), list_id=list_id), now).to_dict()


@router.put("/shopping-items/{item_id}")
def edit_shopping_item(item_id: str, payload: ShoppingItemInput,
                       now: datetime = Depends(get_now),
                       shopping: ShoppingRepository = Depends(get_shopping)):
    current = shopping.get_item(item_id)
    data = dict(payload.model_dump(), list_id=current.list_id, id=item_id)
    if data.get("purchased_at") is None and current.purchased and current.purchased_at:
        data["purchased_at"] = current.purchased_at.isoformat()
    return shopping.save_item(data, now).to_dict()


@router.delete("/shopping-items/{item_id}")
def delete_shopping_item(item_id: str, shopping: ShoppingRepository = Depends(get_shopping)):
    shopping.delete_item(item_id)
    return {"success": True}


@router.get("/shopping/week-spend")
def week_spend(now: datetime = Depends(get_now), shopping: ShoppingRepository = Depends(get_shopping)):
    start, end = week_datetime_bounds(now)
    start_label, end_label = week_timestamp_bounds(now)
    rows = shopping.list_purchased_between(start, end)
    return {"start": start_label, "end": end_label, "week_spend": weekly_spend_total(rows, now)}
