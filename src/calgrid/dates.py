"""Pure calendar date arithmetic.

Every helper takes and returns ``datetime.date`` values and never mutates
its input.
"""

from calendar import monthrange
from datetime import date, datetime, timedelta
from typing import Any


def coerce_date(value: Any) -> date:
    """Convert a date, datetime or ISO-8601 string to a ``date``.

    Raises:
        ValueError: If the value is not a calendar date.
        TypeError: If the value has an unsupported type.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            # Accept a full timestamp such as "2024-01-01T09:30:00"
            return datetime.fromisoformat(text).date()
    raise TypeError(f"Cannot convert {type(value).__name__} to a date")


def add_days(d: date, days: int) -> date:
    return d + timedelta(days=days)


def add_calendar_months(d: date, months: int) -> date:
    """Shift by whole calendar months, clamping to the target month's length."""
    index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last_day = monthrange(year, month)[1]
    return date(year, month, min(d.day, last_day))


def add_calendar_years(d: date, years: int) -> date:
    """Shift by whole calendar years; Feb 29 lands on Feb 28 in common years."""
    year = d.year + years
    last_day = monthrange(year, d.month)[1]
    return date(year, d.month, min(d.day, last_day))


def start_of_week(d: date, week_start: int = 0) -> date:
    """First day of the week holding ``d``.

    Args:
        d: Any date in the week.
        week_start: Python weekday the week starts on (0=Monday, 6=Sunday).
    """
    return d - timedelta(days=(d.weekday() - week_start) % 7)


def end_of_week(d: date, week_start: int = 0) -> date:
    return start_of_week(d, week_start) + timedelta(days=6)


def start_of_month(d: date) -> date:
    return d.replace(day=1)


def end_of_month(d: date) -> date:
    return d.replace(day=monthrange(d.year, d.month)[1])


def start_of_year(d: date) -> date:
    return date(d.year, 1, 1)


def end_of_year(d: date) -> date:
    return date(d.year, 12, 31)
