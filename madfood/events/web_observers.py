"""Web-facing activity feed.

ActivityFeed subscribes to an EventBus for pantry merges, shopping saves and plan saves
and keeps a bounded in-memory buffer that the API exposes at /api/activity.

Design:
  * Each event gets an auto-increment integer id (cursor) so clients can ask only for
    newer events (since=<last_id_seen>).
  * A Lock guards the buffer; FastAPI runs plain def routes in a thread pool.
  * max_events caps memory use.
"""
from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional
from threading import Lock
from datetime import datetime, timezone

from madfood.events.Event_Bus import EventBus, PANTRY_MERGED, SHOPPING_ITEM_SAVED, PLAN_SAVED
from madfood.utilities.constants import ACTIVITY_MAX_EVENTS

WATCHED_EVENTS = (PANTRY_MERGED, SHOPPING_ITEM_SAVED, PLAN_SAVED)


class ActivityFeed:
    def __init__(self, max_events: int = ACTIVITY_MAX_EVENTS, clock: Optional[Callable[[], datetime]] = None):
        self.max_events = max_events
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self._unsubscribers: List[Callable[[], None]] = []

    def attach(self, bus: EventBus) -> "ActivityFeed":
        """Subscribe to the watched events. Attaching twice is a no-op."""
        if self._unsubscribers:
            return self
        for name in WATCHED_EVENTS:
            self._unsubscribers.append(bus.subscribe(name, self.record))
        return self

    def detach(self):
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def record(self, event_name: str, payload: Any):  # signature expected by EventBus
        evt: Dict[str, Any] = {'type': event_name, 'ts': self._clock().isoformat()}
        if isinstance(payload, dict):
            item = payload.get('item')
            if item is not None and hasattr(item, 'name'):
                evt['name'] = item.name
            for k in ('created', 'planned_date', 'deleted'):
                if k in payload:
                    evt[k] = payload[k]
        with self._lock:
            evt['id'] = self._next_id
            self._next_id += 1
            self._events.append(evt)
            # Trim buffer
            if len(self._events) > self.max_events:
                del self._events[: len(self._events) - self.max_events]

    def get_events(self, since: int | None = None) -> Dict[str, Any]:
        """Events newer than 'since' (exclusive), or the whole buffer when since is None.

        next_cursor is the largest id so the client can poll with since=next_cursor.
        """
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['ActivityFeed', 'WATCHED_EVENTS']
