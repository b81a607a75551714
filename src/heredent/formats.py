"""Display formatting for dates and durations."""

from __future__ import annotations

from datetime import date, datetime

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# (unit name, milliseconds per unit), largest first
TIME_UNITS: tuple[tuple[str, int], ...] = (
    ("day", 86_400_000),
    ("hour", 3_600_000),
    ("minute", 60_000),
    ("second", 1_000),
    ("ms", 1),
)


def format_date(value: object) -> str:
    """Format a date for display, e.g. ``November 8, 2025``.

    Accepts ``date``/``datetime`` objects and ISO ``YYYY-MM-DD`` strings.
    Any other string is assumed to be formatted already and is returned as is.
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, str):
        try:
            value = date.fromisoformat(value.strip())
        except ValueError:
            return value
    if isinstance(value, date):
        return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"
    return str(value)


def format_duration(ms: int) -> str:
    """Humanize a millisecond count: ``1 day, 2 hours, 3 minutes``."""
    remaining = int(ms)
    parts: list[str] = []
    for name, size in TIME_UNITS:
        count, remaining = divmod(remaining, size)
        if count:
            plural = "s" if count > 1 and name != "ms" else ""
            parts.append(f"{count} {name}{plural}")
    return ", ".join(parts) or f"{int(ms)} ms"
