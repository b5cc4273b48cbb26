from datetime import date
from typing import List, Optional
from uuid import uuid4

from madfood.domain.PlannedMeal import PlannedMeal
from madfood.infra.json_store import JsonStore
from madfood.infra.paths import PLANS_FILE
from madfood.utilities.constants import FAVORITES_LIMIT, MAIN_SLOT
from madfood.utilities.dates import end_of_month, start_of_month, to_iso_date


class PlanRepository:
    """Weekly plan rows, unique on (planned_date, slot)."""

    def __init__(self, store: JsonStore):
        self.store = store

    def _rows(self) -> List[dict]:
        return self.store.load_rows(PLANS_FILE)

    def list_range(self, start: date, end: date, slot: Optional[str] = None) -> List[PlannedMeal]:
        """Rows with start <= planned_date <= end (inclusive), ascending by date."""
        lo, hi = to_iso_date(start), to_iso_date(end)
        rows = [r for r in self._rows() if lo <= str(r.get("planned_date", "")) <= hi]
        if slot is not None:
            rows = [r for r in rows if (r.get("slot") or MAIN_SLOT) == slot]
        rows.sort(key=lambda r: str(r.get("planned_date", "")))
        return [PlannedMeal.from_dict(r) for r in rows]

    def list_for_month(self, month_date: date) -> List[PlannedMeal]:
        return self.list_range(start_of_month(month_date), end_of_month(month_date))

    def list_favorites(self, limit: int = FAVORITES_LIMIT) -> List[PlannedMeal]:
        rows = [r for r in self._rows() if r.get("is_favorite") and (r.get("slot") or MAIN_SLOT) == MAIN_SLOT]
        rows.sort(key=lambda r: str(r.get("planned_date", "")))
        return [PlannedMeal.from_dict(r) for r in rows[:limit]]

    def save_for_day(self, meal: PlannedMeal) -> Optional[PlannedMeal]:
        """Upsert the day's row, or delete it when the meal is empty. Returns the stored meal or None."""
        key = (meal.iso_date, meal.slot or MAIN_SLOT)
        with self.store.lock:
            rows = self._rows()
            existing = next((r for r in rows if (r.get("planned_date"), r.get("slot") or MAIN_SLOT) == key), None)
            remaining = [r for r in rows if r is not existing]
            if meal.is_empty():
                if existing is not None:
                    self.store.save(PLANS_FILE, remaining)
                return None
            meal.id = (existing or {}).get("id") or meal.id or str(uuid4())
            remaining.append(meal.to_dict())
            self.store.save(PLANS_FILE, remaining)
        return meal
