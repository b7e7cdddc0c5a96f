"""Segmentation of a date range into display columns.

One ``Segmenter`` per ``Scale``. The Day segmenter enumerates dates through
a day calendar; the Week, Month and Year segmenters share a bucket-and-clip
loop over their natural ``Period`` and differ only in how a bucket is
labelled.
"""

from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import Any

from calgrid.calendar import Calendar, calendar_for
from calgrid.logging import get_logger, timed_block
from calgrid.periods import MonthPeriod, Period, WeekPeriod, YearPeriod
from calgrid.types import (
    Column,
    DateRange,
    DayFilterMode,
    Scale,
    WeekNumberingScheme,
)
from calgrid.validation import InvalidRange, validate_range
from calgrid.week_numbers import week_number

_log = get_logger(__name__)


class Segmenter(ABC):
    """Abstract base class for scale segmenters."""

    period: Period | None = None

    @abstractmethod
    def segment(self, range_: DateRange) -> list[Column]:
        """Produce the ordered columns for an already validated range."""
        pass


class DaySegmenter(Segmenter):
    """One column per date kept by the day calendar."""

    def __init__(self, calendar: Calendar | None = None) -> None:
        self.calendar = calendar or calendar_for(DayFilterMode.ALL)

    def segment(self, range_: DateRange) -> list[Column]:
        return [
            Column(
                label=d.strftime("%B %d"),
                sublabel=d.strftime("%A"),
                key=d.isoformat(),
                start=d,
                end=d,
                natural_end=d,
            )
            for d in self.calendar.dt_range(range_.start, range_.end)
        ]


class BucketSegmenter(Segmenter):
    """Partitions a range into natural periods, clipping each to the range end."""

    period: Period

    def segment(self, range_: DateRange) -> list[Column]:
        columns = []
        for natural_start, natural_end in self.period.ranges(range_.start, range_.end):
            end = min(natural_end, range_.end)
            columns.append(self._column(natural_start, end, natural_end))
        return columns

    @abstractmethod
    def _column(self, start: date, end: date, natural_end: date) -> Column:
        """Build the column for one bucket."""
        pass


class WeekSegmenter(BucketSegmenter):
    """Week columns labelled with their week number.

    The week number and the seven day labels always use the unclipped week,
    while the key reflects the clipped span.
    """

    def __init__(
        self, scheme: WeekNumberingScheme | str = WeekNumberingScheme.ISO
    ) -> None:
        self.scheme = WeekNumberingScheme(scheme)
        self.period = WeekPeriod(self.scheme)

    def _column(self, start: date, end: date, natural_end: date) -> Column:
        days = tuple(
            (start + timedelta(days=i)).strftime("%a %d") for i in range(7)
        )
        return Column(
            label=f"Week {week_number(start, self.scheme)}",
            sublabel="",
            key=f"{start.isoformat()}_{end.isoformat()}",
            start=start,
            end=end,
            natural_end=natural_end,
            days=days,
        )


class MonthSegmenter(BucketSegmenter):
    """Month columns sublabelled with their year.

    A clipped month lies within one calendar year, so the sublabel is the
    year of its start.
    """

    def __init__(self) -> None:
        self.period = MonthPeriod()

    def _column(self, start: date, end: date, natural_end: date) -> Column:
        return Column(
            label=start.strftime("%B"),
            sublabel=str(start.year),
            key=f"{start.year:04d}-{start.month:02d}",
            start=start,
            end=end,
            natural_end=natural_end,
        )


class YearSegmenter(BucketSegmenter):
    def __init__(self) -> None:
        self.period = YearPeriod()

    def _column(self, start: date, end: date, natural_end: date) -> Column:
        return Column(
            label=f"{start.year:04d}",
            sublabel="",
            key=f"{start.year:04d}",
            start=start,
            end=end,
            natural_end=natural_end,
        )


_SEGMENTERS = {
    Scale.DAY: lambda scheme, day_filter: DaySegmenter(calendar_for(day_filter)),
    Scale.WEEK: lambda scheme, day_filter: WeekSegmenter(scheme),
    Scale.MONTH: lambda scheme, day_filter: MonthSegmenter(),
    Scale.YEAR: lambda scheme, day_filter: YearSegmenter(),
}


def get_segmenter(
    scale: Scale | str,
    scheme: WeekNumberingScheme | str = WeekNumberingScheme.ISO,
    day_filter: DayFilterMode | str = DayFilterMode.ALL,
) -> Segmenter:
    """Return the segmenter for a scale.

    The day filter only affects the Day segmenter and the scheme only the
    Week segmenter.

    Raises:
        ValueError: If scale, scheme or filter is not a known value.
    """
    scale = Scale(scale)
    scheme = WeekNumberingScheme(scheme)
    day_filter = DayFilterMode(day_filter)
    try:
        factory = _SEGMENTERS[scale]
    except KeyError:
        raise ValueError(f"No segmenter registered for scale: {scale}") from None
    return factory(scheme, day_filter)


def segment(
    range_: DateRange | tuple[Any, Any],
    scale: Scale | str,
    scheme: WeekNumberingScheme | str,
    day_filter: DayFilterMode | str = DayFilterMode.ALL,
) -> list[Column]:
    """Split a date range into ordered display columns.

    Args:
        range_: Inclusive range, as a DateRange or a (start, end) pair of
            dates, datetimes or ISO strings.
        scale: Column granularity.
        scheme: Week numbering scheme; also fixes the week start day.
        day_filter: Days kept at Day scale. Other scales show whole buckets.

    Returns:
        A new list of columns. Empty when the filter removes every date.

    Raises:
        InvalidRange: If a bound is not a calendar date, start > end, or a
            bound's week, month or year reaches past ``date.min`` or
            ``date.max``.
    """
    segmenter = get_segmenter(scale, scheme, day_filter)
    try:
        validated = validate_range(range_, segmenter.period)
    except InvalidRange as e:
        _log.info("invalid_range", error=str(e))
        raise

    log = _log.bind(
        scale=Scale(scale).value,
        scheme=WeekNumberingScheme(scheme).value,
        day_filter=DayFilterMode(day_filter).value,
    )
    log.debug(
        "segment_started",
        start=validated.start.isoformat(),
        end=validated.end.isoformat(),
    )
    with timed_block(log, "segment_completed") as fields:
        columns = segmenter.segment(validated)
        fields["column_count"] = len(columns)
    return columns
