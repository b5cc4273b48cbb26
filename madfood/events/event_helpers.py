"""Event helper utilities.

Thin publishing helpers so callers do not build payload dicts by hand.

Quick import:
    from madfood.events.event_helpers import (
        publish_pantry_merged, publish_shopping_item_saved, publish_plan_saved
    )
"""
from __future__ import annotations
from typing import Any, Optional
from .Event_Bus import EventBus, PANTRY_MERGED, SHOPPING_ITEM_SAVED, PLAN_SAVED

__all__ = ['publish_pantry_merged', 'publish_shopping_item_saved', 'publish_plan_saved']


def publish_pantry_merged(bus: Optional[EventBus], item: Any, created: bool):
    """Publish a pantry.merged event (no-op without a bus)."""
    if bus is not None:
        bus.publish(PANTRY_MERGED, {'item': item, 'created': created})


def publish_shopping_item_saved(bus: Optional[EventBus], item: Any):
    if bus is not None:
        bus.publish(SHOPPING_ITEM_SAVED, {'item': item})


def publish_plan_saved(bus: Optional[EventBus], planned_date: str, deleted: bool):
    if bus is not None:
        bus.publish(PLAN_SAVED, {'planned_date': planned_date, 'deleted': deleted})
