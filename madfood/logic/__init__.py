"""Core business logic layer.

Subpackages:
- calendar: month grid for the planner
- planner: weekly plan aggregates and label resolution
- costs: meal cost inference from ingredient prices
- shopping: basket totals and weekly spend
- pantry: pantry value and shopping-to-pantry merge
- reminders: weekly reminder text
- dashboard: this-week summary and daily motivation

Everything here is pure: rows in, values out, "now" always passed by the caller.
"""
__all__ = ["calendar", "planner", "costs", "shopping", "pantry", "reminders", "dashboard"]
