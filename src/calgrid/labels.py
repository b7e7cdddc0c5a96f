"""Row labels for the grid and week choices for the week picker."""

from datetime import date
from typing import NamedTuple

from calgrid.dates import add_calendar_months, add_days, end_of_week, start_of_week
from calgrid.types import Scale, WeekNumberingScheme
from calgrid.week_numbers import week_number, week_start_weekday


class WeekInfo(NamedTuple):
    """A whole week and its number."""

    start: date
    end: date
    week_number: int


def row_labels(scale: Scale | str, start: date, segments: int = 24) -> list[str]:
    """Labels for the ``segments`` rows drawn beside the columns.

    DAY rows are hours, WEEK rows are weekdays from the Monday of
    ``start``'s week, MONTH rows are week ordinals and YEAR rows are months
    from January of ``start``'s year.

    Raises:
        ValueError: If the scale is unknown or segments is negative.
    """
    scale = Scale(scale)
    if segments < 0:
        raise ValueError(f"segments must not be negative, got {segments}")

    if scale is Scale.DAY:
        return [f"{i:02d}:00" for i in range(segments)]
    elif scale is Scale.WEEK:
        monday = start_of_week(start, 0)
        return [add_days(monday, i).strftime("%a") for i in range(segments)]
    elif scale is Scale.MONTH:
        return [f"Week {i + 1}" for i in range(segments)]
    elif scale is Scale.YEAR:
        january = date(start.year, 1, 1)
        return [add_calendar_months(january, i).strftime("%b") for i in range(segments)]
    else:
        raise ValueError(f"Unknown scale: {scale}")


def week_info(
    d: date, scheme: WeekNumberingScheme | str = WeekNumberingScheme.ISO
) -> WeekInfo:
    """The week holding ``d`` under ``scheme``."""
    week_start = week_start_weekday(scheme)
    start = start_of_week(d, week_start)
    return WeekInfo(start, end_of_week(d, week_start), week_number(start, scheme))


def week_choices(
    center: date,
    scheme: WeekNumberingScheme | str = WeekNumberingScheme.ISO,
    offsets: tuple[int, ...] = (-1, 0, 1),
) -> list[WeekInfo]:
    """Weeks around ``center``, one per offset in weeks."""
    return [week_info(add_days(center, 7 * offset), scheme) for offset in offsets]
