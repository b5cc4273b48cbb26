"""Simple Event Bus / Observer implementation.

Event names used so far:
  pantry.merged        -> payload {"item": PantryItem, "created": bool}
  shopping.item_saved  -> payload {"item": ShoppingItem}
  plan.saved           -> payload {"planned_date": str, "deleted": bool}

Subscribers are callables taking (event_name, payload). A bus belongs to whoever
creates it (the FastAPI app keeps one on app.state); there is no shared module instance.
"""
from __future__ import annotations
from typing import Callable, Any, Dict, List
import logging

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PANTRY_MERGED = "pantry.merged"
SHOPPING_ITEM_SAVED = "shopping.item_saved"
PLAN_SAVED = "plan.saved"

Listener = Callable[[str, Any], None]


class EventBus:
	def __init__(self):
		self._listeners: Dict[str, List[Listener]] = {}

	def listeners(self, event_name: str) -> List[Listener]:
		return list(self._listeners.get(event_name, ()))

	def subscribe(self, event_name: str, callback: Listener) -> Callable[[], None]:
		"""Register a listener once per event; the returned callable removes it again."""
		bucket = self._listeners.setdefault(event_name, [])
		if callback not in bucket:
			bucket.append(callback)
		return lambda: self.unsubscribe(event_name, callback)

	def unsubscribe(self, event_name: str, callback: Listener) -> bool:
		bucket = self._listeners.get(event_name)
		if not bucket or callback not in bucket:
			return False
		bucket.remove(callback)
		if not bucket:
			del self._listeners[event_name]
		return True

	def publish(self, event_name: str, payload: Any = None) -> int:
		"""Deliver to every listener of ``event_name``; returns how many took it without raising."""
		delivered = 0
		for listener in self.listeners(event_name):
			try:
				listener(event_name, payload)
			except Exception:
				# the write that triggered the event has already happened
				logger.exception("Listener %r failed on %s", listener, event_name)
			else:
				delivered += 1
		logger.debug("Published %s to %d listener(s)", event_name, delivered)
		return delivered


__all__ = ['EventBus', 'Listener', 'PANTRY_MERGED', 'SHOPPING_ITEM_SAVED', 'PLAN_SAVED']
