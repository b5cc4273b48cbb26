"""Calendar date helpers: month/week boundaries, day iteration and a fixed set of display formats.

Weeks start on Sunday (index 0) unless ``week_starts_on`` says otherwise. Every
function accepts a ``date`` or a ``datetime`` and works on the calendar date only.
"""
from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterator, Tuple, Union

from madfood.utilities.constants import ISO_DATE_FORMAT, WEEK_STARTS_ON

DateLike = Union[date, datetime]

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
SHORT_MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
WEEKDAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
SHORT_WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

SUPPORTED_PATTERNS = ("yyyy-MM-dd", "MMMM yyyy", "MMMM", "EEEE, MMM d", "EEE, MMM d", "d")


def as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def day_index(value: DateLike) -> int:
    """Weekday index with Sunday = 0 ... Saturday = 6."""
    return (as_date(value).weekday() + 1) % 7


def start_of_month(value: DateLike) -> date:
    d = as_date(value)
    return d.replace(day=1)


def end_of_month(value: DateLike) -> date:
    d = as_date(value)
    return d.replace(day=calendar.monthrange(d.year, d.month)[1])


def add_months(value: DateLike, amount: int) -> date:
    """Shift by whole months; the day is clamped to the target month's length (Jan 31 + 1 -> Feb 28/29)."""
    d = as_date(value)
    month_index = d.year * 12 + (d.month - 1) + amount
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(d.day, last_day))


def sub_months(value: DateLike, amount: int) -> date:
    return add_months(value, -amount)


def start_of_week(value: DateLike, week_starts_on: int = WEEK_STARTS_ON) -> date:
    d = as_date(value)
    shift = (day_index(d) - week_starts_on + 7) % 7
    return d - timedelta(days=shift)


def end_of_week(value: DateLike, week_starts_on: int = WEEK_STARTS_ON) -> date:
    return start_of_week(value, week_starts_on) + timedelta(days=6)


def is_same_day(left: DateLike, right: DateLike) -> bool:
    return as_date(left) == as_date(right)


def is_same_month(left: DateLike, right: DateLike) -> bool:
    a, b = as_date(left), as_date(right)
    return a.year == b.year and a.month == b.month


class DayInterval:
    """Inclusive run of calendar days. Iterating twice yields the same days again."""

    def __init__(self, start: DateLike, end: DateLike):
        self.start = as_date(start)
        self.end = as_date(end)

    def __iter__(self) -> Iterator[date]:
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def __len__(self) -> int:
        return max(0, (self.end - self.start).days + 1)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, date):
            return False
        return self.start <= as_date(value) <= self.end

    def __repr__(self) -> str:
        return f"DayInterval({self.start.isoformat()}..{self.end.isoformat()})"


def each_day_of_interval(start: DateLike, end: DateLike) -> DayInterval:
    return DayInterval(start, end)


def format_date(value: DateLike, pattern: str) -> str:
    d = as_date(value)
    if pattern == "yyyy-MM-dd":
        return d.isoformat()
    if pattern == "MMMM yyyy":
        return f"{MONTH_NAMES[d.month - 1]} {d.year}"
    if pattern == "MMMM":
        return MONTH_NAMES[d.month - 1]
    if pattern == "EEEE, MMM d":
        return f"{WEEKDAY_NAMES[day_index(d)]}, {SHORT_MONTH_NAMES[d.month - 1]} {d.day}"
    if pattern == "EEE, MMM d":
        return f"{SHORT_WEEKDAY_NAMES[day_index(d)]}, {SHORT_MONTH_NAMES[d.month - 1]} {d.day}"
    if pattern == "d":
        return str(d.day)
    raise ValueError(f"Unsupported date pattern: {pattern!r}")


def to_iso_date(value: DateLike) -> str:
    return format_date(value, ISO_DATE_FORMAT)


def parse_iso_date(text: str) -> date:
    '''Parses a yyyy-MM-dd label. Raises ValueError on anything else.'''
    return datetime.strptime(text.strip(), "%Y-%m-%d").date()


def week_date_range(now: DateLike, week_starts_on: int = WEEK_STARTS_ON) -> Tuple[date, date]:
    return start_of_week(now, week_starts_on), end_of_week(now, week_starts_on)


def week_datetime_bounds(now: DateLike, week_starts_on: int = WEEK_STARTS_ON) -> Tuple[datetime, datetime]:
    """UTC instants covering the week: first day 00:00:00.000 through last day 23:59:59.999."""
    start, end = week_date_range(now, week_starts_on)
    return (
        datetime.combine(start, time(0, 0, 0, 0), tzinfo=timezone.utc),
        datetime.combine(end, time(23, 59, 59, 999000), tzinfo=timezone.utc),
    )


def to_iso_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2024-02-04T00:00:00.000Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def week_timestamp_bounds(now: DateLike, week_starts_on: int = WEEK_STARTS_ON) -> Tuple[str, str]:
    start, end = week_datetime_bounds(now, week_starts_on)
    return to_iso_timestamp(start), to_iso_timestamp(end)


def parse_timestamp(value) -> datetime | None:
    """Parse an ISO-8601 timestamp (trailing Z allowed). Naive values are read as UTC; garbage gives None."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
