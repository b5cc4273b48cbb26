import logging
from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from madfood.domain.ShoppingList import ShoppingItem, ShoppingList
from madfood.events.Event_Bus import EventBus
from madfood.events.event_helpers import publish_shopping_item_saved
from madfood.infra.json_store import JsonStore
from madfood.infra.Pantry_Repository import PantryRepository
from madfood.infra.paths import SHOPPING_ITEMS_FILE, SHOPPING_LISTS_FILE
from madfood.logic.shopping.totals import prepare_shopping_item
from madfood.utilities.dates import parse_timestamp
from madfood.utilities.errors import RecordNotFound
from madfood.utilities.text import clean_text

logger = logging.getLogger(__name__)


def _ts_key(row: Mapping[str, Any], field: str) -> str:
    return str(row.get(field) or "")


class ShoppingRepository:
    def __init__(self, store: JsonStore, pantry: PantryRepository, bus: Optional[EventBus] = None):
        self.store = store
        self.pantry = pantry
        self.bus = bus

    # --- Lists ---------------------------------------------------------------
    def list_lists(self) -> List[ShoppingList]:
        """Lists with their items; lists by most recent update, items in creation order."""
        lists = self.store.load_rows(SHOPPING_LISTS_FILE)
        lists.sort(key=lambda r: _ts_key(r, "updated_at"), reverse=True)
        items = self.store.load_rows(SHOPPING_ITEMS_FILE)
        items.sort(key=lambda r: _ts_key(r, "created_at"))
        by_list: Dict[str, List[dict]] = defaultdict(list)
        for row in items:
            by_list[row.get("list_id")].append(row)
        return [ShoppingList.from_dict(l, by_list.get(l.get("id"), [])) for l in lists]

    def get_list(self, list_id: str) -> ShoppingList:
        for shopping_list in self.list_lists():
            if shopping_list.id == list_id:
                return shopping_list
        raise RecordNotFound(SHOPPING_LISTS_FILE, list_id)

    def create_list(self, name: str, now: datetime) -> ShoppingList:
        clean = clean_text(name)
        if not clean:
            raise ValueError("List name is required")
        row = {"id": str(uuid4()), "name": clean, "created_at": now.isoformat(), "updated_at": now.isoformat()}
        with self.store.lock:
            rows = self.store.load_rows(SHOPPING_LISTS_FILE)
            rows.append(row)
            self.store.save(SHOPPING_LISTS_FILE, rows)
        return ShoppingList.from_dict(row)

    def rename_list(self, list_id: str, name: str, now: datetime) -> ShoppingList:
        clean = clean_text(name)
        if not clean:
            raise ValueError("List name is required")
        with self.store.lock:
            rows = self.store.load_rows(SHOPPING_LISTS_FILE)
            for row in rows:
                if row.get("id") == list_id:
                    row["name"] = clean
                    row["updated_at"] = now.isoformat()
                    self.store.save(SHOPPING_LISTS_FILE, rows)
                    return ShoppingList.from_dict(row)
        raise RecordNotFound(SHOPPING_LISTS_FILE, list_id)

    def delete_list(self, list_id: str) -> None:
        """Deletes the list and its items."""
        with self.store.lock:
            rows = self.store.load_rows(SHOPPING_LISTS_FILE)
            remaining = [r for r in rows if r.get("id") != list_id]
            if len(remaining) == len(rows):
                raise RecordNotFound(SHOPPING_LISTS_FILE, list_id)
            items = [r for r in self.store.load_rows(SHOPPING_ITEMS_FILE) if r.get("list_id") != list_id]
            self.store.save(SHOPPING_ITEMS_FILE, items)
            self.store.save(SHOPPING_LISTS_FILE, remaining)

    # --- Items ---------------------------------------------------------------
    def save_item(self, payload: Mapping[str, Any], now: datetime) -> ShoppingItem:
        """Insert or update an item.

        New items default to "already have" when an in-stock pantry item has the same name.
        Saving an item as "already have" merges it into the pantry.
        """
        is_new = not clean_text(payload.get("id"))
        pantry_match = self.pantry.has_in_stock_match(clean_text(payload.get("name"))) if is_new else False
        item = prepare_shopping_item(payload, now, pantry_match=pantry_match)

        with self.store.lock:
            if item.list_id not in {r.get("id") for r in self.store.load_rows(SHOPPING_LISTS_FILE)}:
                raise RecordNotFound(SHOPPING_LISTS_FILE, item.list_id)
            rows = self.store.load_rows(SHOPPING_ITEMS_FILE)
            existing = next((r for r in rows if not is_new and r.get("id") == item.id), None)
            if not is_new and existing is None:
                raise RecordNotFound(SHOPPING_ITEMS_FILE, item.id)
            item.id = item.id or str(uuid4())
            row = item.to_dict()
            row["created_at"] = (existing or {}).get("created_at") or now.isoformat()
            rows = [r for r in rows if r.get("id") != item.id] + [row]
            self.store.save(SHOPPING_ITEMS_FILE, rows)

        if item.already_have_in_pantry:
            self.pantry.upsert_from_shopping_item(item.name, item.quantity, item.price)
        publish_shopping_item_saved(self.bus, item)
        return item

    def delete_item(self, item_id: str) -> None:
        with self.store.lock:
            rows = self.store.load_rows(SHOPPING_ITEMS_FILE)
            remaining = [r for r in rows if r.get("id") != item_id]
            if len(remaining) == len(rows):
                raise RecordNotFound(SHOPPING_ITEMS_FILE, item_id)
            self.store.save(SHOPPING_ITEMS_FILE, remaining)

    def get_item(self, item_id: str) -> ShoppingItem:
        for row in self.store.load_rows(SHOPPING_ITEMS_FILE):
            if row.get("id") == item_id:
                return ShoppingItem.from_dict(row)
        raise RecordNotFound(SHOPPING_ITEMS_FILE, item_id)

    def list_items_recent_first(self) -> List[ShoppingItem]:
        rows = self.store.load_rows(SHOPPING_ITEMS_FILE)
        rows.sort(key=lambda r: _ts_key(r, "updated_at"), reverse=True)
        return [ShoppingItem.from_dict(r) for r in rows]

    def list_purchased_between(self, start: datetime, end: datetime) -> List[ShoppingItem]:
        """Purchased items with start <= purchased_at <= end (aware datetimes)."""
        result = []
        for row in self.store.load_rows(SHOPPING_ITEMS_FILE):
            if not row.get("purchased"):
                continue
            purchased_at = parse_timestamp(row.get("purchased_at"))
            if purchased_at is not None and start <= purchased_at <= end:
                result.append(ShoppingItem.from_dict(row))
        return result
