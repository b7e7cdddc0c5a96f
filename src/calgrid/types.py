"""Value types shared by the segmentation engine."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any


class Scale(str, Enum):
    """Granularity at which a range is divided into columns."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class WeekNumberingScheme(str, Enum):
    """Week numbering convention.

    ISO weeks start on Monday and week 1 holds the first Thursday of the year.
    US weeks start on Sunday and week 1 holds January 1.
    """

    ISO = "iso"
    US = "us"


class DayFilterMode(str, Enum):
    """Which days of the week a Day-scale segmentation keeps."""

    ALL = "all"
    BUSINESS = "business"
    WEEKEND = "weekend"


class RangeType(str, Enum):
    """How the range of a scale was picked (a whole week or a custom span)."""

    WEEK = "week"
    CUSTOM = "custom"


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range.

    A range returned by ``validate_range`` always holds ``date`` bounds with
    ``start <= end``. Raw ranges (strings, inverted bounds) may be built
    directly and are rejected when validated.
    """

    start: date
    end: date

    @classmethod
    def parse(cls, start: Any, end: Any) -> "DateRange":
        """Build a validated range from raw bounds.

        Raises:
            InvalidRange: If a bound is not a calendar date or start > end.
        """
        from calgrid.validation import validate_range

        return validate_range((start, end))

    @property
    def days(self) -> int:
        """Number of days in the range, both bounds included."""
        return (self.end - self.start).days + 1

    def contains(self, d: date) -> bool:
        return self.start <= d <= self.end


@dataclass(frozen=True)
class Column:
    """One displayed time bucket.

    ``start`` is the natural start of the bucket and may precede the range
    start for Week/Month/Year columns. ``end`` is clipped to the range end
    while ``natural_end`` keeps the unclipped period end.
    """

    label: str
    sublabel: str
    key: str
    start: date
    end: date
    natural_end: date
    days: tuple[str, ...] = field(default_factory=tuple)

    def as_dict(self) -> dict[str, Any]:
        """Plain mapping of the column, used for tabular export."""
        return {
            "key": self.key,
            "label": self.label,
            "sublabel": self.sublabel,
            "start": self.start,
            "end": self.end,
            "natural_end": self.natural_end,
            "days": list(self.days),
        }
