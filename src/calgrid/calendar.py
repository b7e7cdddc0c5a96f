"""Day calendars selecting which dates a Day-scale segmentation enumerates."""

from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import Iterator

from calgrid.filters import keep
from calgrid.types import DayFilterMode


class Calendar(ABC):
    """Abstract base class for day calendars."""

    @abstractmethod
    def contains(self, d: date) -> bool:
        """Whether ``d`` is a valid date of this calendar."""
        pass

    def dt_range(self, start: date, end: date) -> Iterator[date]:
        """Generate valid dates in range [start, end]."""
        current = start
        while current <= end:
            if self.contains(current):
                yield current
            if current == end:
                break
            current += timedelta(days=1)


class DateCalendar(Calendar):
    """Calendar that includes all dates."""

    def contains(self, d: date) -> bool:
        return True


class BDateCalendar(Calendar):
    """Business date calendar - excludes weekends (Sat/Sun)."""

    def contains(self, d: date) -> bool:
        return keep(d, DayFilterMode.BUSINESS)


class WeekendCalendar(Calendar):
    """Weekend calendar - only Saturdays and Sundays."""

    def contains(self, d: date) -> bool:
        return keep(d, DayFilterMode.WEEKEND)


_CALENDARS: dict[DayFilterMode, type[Calendar]] = {
    DayFilterMode.ALL: DateCalendar,
    DayFilterMode.BUSINESS: BDateCalendar,
    DayFilterMode.WEEKEND: WeekendCalendar,
}


def calendar_for(mode: DayFilterMode | str) -> Calendar:
    """Return the day calendar implementing a filter mode."""
    return _CALENDARS[DayFilterMode(mode)]()
