"""Pantry repository (JSON store persistence)."""
import logging
from typing import Any, List, Mapping, Optional
from uuid import uuid4

from madfood.domain.PantryItem import PantryItem
from madfood.events.Event_Bus import EventBus
from madfood.events.event_helpers import publish_pantry_merged
from madfood.infra.json_store import JsonStore
from madfood.infra.paths import PANTRY_FILE
from madfood.logic.pantry.value import find_by_name, has_in_stock_match, merge_pantry_from_shopping, sort_pantry_items
from madfood.utilities.errors import RecordNotFound
from madfood.utilities.money import coerce_amount, to_two_decimals
from madfood.utilities.text import as_flag, clean_text, optional_text

logger = logging.getLogger(__name__)


class PantryRepository:
    def __init__(self, store: JsonStore, bus: Optional[EventBus] = None):
        self.store = store
        self.bus = bus

    def list_items(self) -> List[PantryItem]:
        """In-stock items first, then alphabetical."""
        return sort_pantry_items(self.store.load_rows(PANTRY_FILE))

    def find_by_name(self, name: str) -> Optional[PantryItem]:
        return find_by_name(self.store.load_rows(PANTRY_FILE), name)

    def has_in_stock_match(self, name: str) -> bool:
        return has_in_stock_match(self.store.load_rows(PANTRY_FILE), name)

    def save(self, payload: Mapping[str, Any]) -> PantryItem:
        name = clean_text(payload.get("name"))
        if not name:
            raise ValueError("Pantry item name is required")
        item = PantryItem(
            id=clean_text(payload.get("id")),
            name=name,
            quantity=to_two_decimals(coerce_amount(payload.get("quantity"))),
            unit=optional_text(payload.get("unit")),
            estimated_price=to_two_decimals(coerce_amount(payload.get("estimated_price"))),
            in_stock=as_flag(payload.get("in_stock", True)),
        )
        return self._write(item, must_exist=bool(item.id))

    def _write(self, item: PantryItem, must_exist: bool = False) -> PantryItem:
        with self.store.lock:
            rows = self.store.load_rows(PANTRY_FILE)
            if must_exist and not any(r.get("id") == item.id for r in rows):
                raise RecordNotFound(PANTRY_FILE, item.id)
            item.id = item.id or str(uuid4())
            rows = [r for r in rows if r.get("id") != item.id] + [item.to_dict()]
            self.store.save(PANTRY_FILE, rows)
        return item

    def delete(self, item_id: str) -> None:
        with self.store.lock:
            rows = self.store.load_rows(PANTRY_FILE)
            remaining = [r for r in rows if r.get("id") != item_id]
            if len(remaining) == len(rows):
                raise RecordNotFound(PANTRY_FILE, item_id)
            self.store.save(PANTRY_FILE, remaining)

    def upsert_from_shopping_item(self, name: str, quantity: Any, estimated_price: Any) -> Optional[PantryItem]:
        """Merge an "already have" shopping item into the pantry: read, match by name, write once."""
        with self.store.lock:
            existing = self.find_by_name(name)
            merged = merge_pantry_from_shopping(existing, name, quantity, estimated_price)
            if merged is None:
                return None
            self._write(merged)
        logger.info("Pantry %s from shopping item: %s", "updated" if existing else "created", merged)
        publish_pantry_merged(self.bus, merged, created=existing is None)
        return merged
