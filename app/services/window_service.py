from collections.abc import Sequence
from datetime import date, datetime, timedelta

WINDOW_DAYS = 7

_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def generate_window(anchor: date | datetime) -> list[date]:
    """Seven consecutive calendar days starting at the anchor's day."""
    start = _as_date(anchor)
    return [start + timedelta(days=i) for i in range(WINDOW_DAYS)]


def same_day(a: date | datetime, b: date | datetime) -> bool:
    return _as_date(a) == _as_date(b)


def in_window(window: Sequence[date], d: date | datetime) -> bool:
    return any(same_day(w, d) for w in window)


def date_label(d: date) -> str:
    """Short label for a window entry, e.g. "Tue Mar 05 2024". Locale independent."""
    return f"{_DAY_NAMES[d.weekday()]} {_MONTH_NAMES[d.month - 1]} {d.day:02d} {d.year}"
