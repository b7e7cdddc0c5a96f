"""Day-of-week predicate for Day-scale segmentation."""

from datetime import date

from calgrid.types import DayFilterMode


def keep(d: date, mode: DayFilterMode | str) -> bool:
    """Return True if ``d`` survives the filter ``mode``."""
    mode = DayFilterMode(mode)
    if mode is DayFilterMode.BUSINESS:
        return d.weekday() < 5  # Mon-Fri = 0-4
    if mode is DayFilterMode.WEEKEND:
        return d.weekday() >= 5
    return True
