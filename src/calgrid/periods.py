"""Natural period boundaries for each scale.

A ``Period`` knows where the period holding a date starts and ends and how
to step a date by whole periods. Segmenters use it to bucket a range and
the scale converter uses it as the per-column increment.
"""

from abc import ABC, abstractmethod
from datetime import date

from calgrid.dates import (
    add_calendar_months,
    add_calendar_years,
    add_days,
    end_of_month,
    end_of_year,
    start_of_month,
    start_of_week,
    start_of_year,
)
from calgrid.types import Scale, WeekNumberingScheme
from calgrid.week_numbers import week_start_weekday


class Period(ABC):
    """Abstract base class for natural calendar periods."""

    @abstractmethod
    def start_of(self, d: date) -> date:
        """Start of the period containing ``d``."""
        pass

    @abstractmethod
    def end_of(self, d: date) -> date:
        """End (inclusive) of the period containing ``d``."""
        pass

    @abstractmethod
    def shift(self, d: date, periods: int) -> date:
        """Shift ``d`` by N periods, keeping its position within the period."""
        pass

    def ranges(self, start: date, end: date) -> list[tuple[date, date]]:
        """Split [start, end] into natural (unclipped) period ranges.

        The first range begins at the start of the period holding ``start``;
        the last is the one holding ``end``. No period past it is computed, so
        a range ending in 9999 stays within ``date.max``.
        """
        chunks = []
        if start > end:
            return chunks
        current = self.start_of(start)
        while True:
            natural_end = self.end_of(current)
            chunks.append((current, natural_end))
            if natural_end >= end:
                return chunks
            current = self.shift(current, 1)


class DayPeriod(Period):
    def start_of(self, d: date) -> date:
        return d

    def end_of(self, d: date) -> date:
        return d

    def shift(self, d: date, periods: int) -> date:
        return add_days(d, periods)


class WeekPeriod(Period):
    """Seven-day week starting on the scheme's week-start weekday."""

    def __init__(
        self, scheme: WeekNumberingScheme | str = WeekNumberingScheme.ISO
    ) -> None:
        self.scheme = WeekNumberingScheme(scheme)
        self.week_start = week_start_weekday(self.scheme)

    def start_of(self, d: date) -> date:
        return start_of_week(d, self.week_start)

    def end_of(self, d: date) -> date:
        return add_days(self.start_of(d), 6)

    def shift(self, d: date, periods: int) -> date:
        return add_days(d, 7 * periods)


class MonthPeriod(Period):
    def start_of(self, d: date) -> date:
        return start_of_month(d)

    def end_of(self, d: date) -> date:
        return end_of_month(d)

    def shift(self, d: date, periods: int) -> date:
        return add_calendar_months(d, periods)


class YearPeriod(Period):
    def start_of(self, d: date) -> date:
        return start_of_year(d)

    def end_of(self, d: date) -> date:
        return end_of_year(d)

    def shift(self, d: date, periods: int) -> date:
        return add_calendar_years(d, periods)


def period_for(
    scale: Scale | str,
    scheme: WeekNumberingScheme | str = WeekNumberingScheme.ISO,
) -> Period:
    """Return the natural period for a scale.

    Raises:
        ValueError: If the scale is unknown.
    """
    scale = Scale(scale)
    if scale is Scale.DAY:
        return DayPeriod()
    elif scale is Scale.WEEK:
        return WeekPeriod(scheme)
    elif scale is Scale.MONTH:
        return MonthPeriod()
    elif scale is Scale.YEAR:
        return YearPeriod()
    else:
        raise ValueError(f"Unknown scale: {scale}")
