"""Week numbering under the ISO and US conventions."""

from datetime import date, timedelta

from calgrid.dates import start_of_week
from calgrid.types import WeekNumberingScheme

_MONDAY = 0
_SUNDAY = 6


def week_start_weekday(scheme: WeekNumberingScheme | str) -> int:
    """Python weekday (0=Monday) on which weeks start under ``scheme``."""
    scheme = WeekNumberingScheme(scheme)
    if scheme is WeekNumberingScheme.ISO:
        return _MONDAY
    return _SUNDAY


def week_number(d: date, scheme: WeekNumberingScheme | str) -> int:
    """Ordinal number (>= 1) of the week holding ``d``.

    ISO: the Thursday of the Monday-start week decides the owning year, and
    week 1 is the week holding that year's January 4 (its first Thursday).
    Boundary weeks therefore go to the year owning most of their days, so
    2021-01-01 falls in week 53 of 2020.

    US: week 1 is the Sunday-start week holding January 1 of ``d``'s year,
    whatever share of it falls in the previous year.
    """
    scheme = WeekNumberingScheme(scheme)
    if scheme is WeekNumberingScheme.ISO:
        thursday = start_of_week(d, _MONDAY) + timedelta(days=3)
        week_one = start_of_week(date(thursday.year, 1, 4), _MONDAY)
        return (thursday - week_one).days // 7 + 1

    # Offset from January 1; the Sunday before 0001-01-01 is not a date.
    january_first = date(d.year, 1, 1)
    offset = (january_first.weekday() - _SUNDAY) % 7
    return ((d - january_first).days + offset) // 7 + 1
