from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_DATETIME = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Return [midnight, next midnight) for the given calendar day."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def parse_hhmm(value: str) -> time:
    """Parse HH:MM string into time."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def parse_range_bound(value: str, *, end: bool = False) -> datetime:
    """Parse a query-string bound (YYYY-MM-DD or ISO datetime).

    A date-only upper bound covers the whole day.
    """
    value = value.strip()
    if _DATE_ONLY.match(value):
        day = datetime.strptime(value, "%Y-%m-%d").date()
        return datetime.combine(day, time.max if end else time.min)
    if not _DATETIME.match(value):
        raise ValueError(f"Unsupported date value: {value!r}")
    if value.endswith("Z"):
        value = value[:-1]
    parsed = datetime.fromisoformat(value)
    # Records are naive local time; drop any offset sent by the client.
    return parsed.replace(tzinfo=None)


def short_day_label(day: date) -> str:
    """Format a day like 'Jan 15'."""
    return f"{day.strftime('%b')} {day.day}"
