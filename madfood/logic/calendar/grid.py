"""Month grid for the planner calendar.

Provides build_month_grid(month_date, now): Sunday-aligned full weeks covering the month.
"""
from __future__ import annotations
from datetime import date
from typing import Any, Dict, List
from madfood.utilities.dates import (
    DateLike, as_date, each_day_of_interval, end_of_month, end_of_week, format_date,
    is_same_day, is_same_month, start_of_month, start_of_week, to_iso_date
)

WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


class CalendarCell:
    __slots__ = ("date", "iso", "in_month", "is_today")

    def __init__(self, date: date, in_month: bool, is_today: bool):
        self.date = date
        self.iso = to_iso_date(date)
        self.in_month = in_month
        self.is_today = is_today

    def __eq__(self, other):
        if not isinstance(other, CalendarCell):
            return NotImplemented
        return (self.date, self.in_month, self.is_today) == (other.date, other.in_month, other.is_today)

    def __repr__(self) -> str:
        flags = "".join(["M" if self.in_month else "-", "T" if self.is_today else "-"])
        return f"CalendarCell({self.iso} {flags})"

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.iso, "iso": self.iso, "in_month": self.in_month, "is_today": self.is_today}


def build_month_grid(month_date: DateLike, now: DateLike) -> List[CalendarCell]:
    """Cells from the Sunday on/before the 1st through the Saturday on/after the last day.

    The result always holds 7*N cells (N is 4, 5 or 6). ``now`` is compared by calendar
    day only, so passing a datetime with any time of day gives the same grid.
    """
    target = as_date(month_date)
    today = as_date(now)
    grid_start = start_of_week(start_of_month(target), 0)
    grid_end = end_of_week(end_of_month(target), 0)
    return [
        CalendarCell(day, in_month=is_same_month(day, target), is_today=is_same_day(day, today))
        for day in each_day_of_interval(grid_start, grid_end)
    ]


def grid_weeks(cells: List[CalendarCell]) -> List[List[CalendarCell]]:
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def month_title(month_date: DateLike) -> str:
    return format_date(month_date, "MMMM yyyy")
