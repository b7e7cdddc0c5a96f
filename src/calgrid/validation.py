"""Date range validation."""

from datetime import date
from typing import Any

from calgrid.dates import coerce_date
from calgrid.periods import Period
from calgrid.types import DateRange


class ValidationError(ValueError):
    """Base class for calgrid validation failures."""
    pass


class InvalidRange(ValidationError):
    """Raised when range bounds are unparseable, inverted or unrepresentable."""
    pass


def validate_range(
    range_: DateRange | tuple[Any, Any],
    period: Period | None = None,
) -> DateRange:
    """Validate a range before segmentation.

    Checks:
    1. Both bounds are calendar dates (``date``, ``datetime`` or ISO string)
    2. start <= end
    3. With ``period``, the periods holding both bounds lie within
       ``date.min`` and ``date.max``

    Returns:
        A DateRange holding ``date`` bounds.

    Raises:
        InvalidRange: If validation fails
    """
    if isinstance(range_, DateRange):
        raw_start, raw_end = range_.start, range_.end
    else:
        try:
            raw_start, raw_end = range_
        except (TypeError, ValueError) as e:
            raise InvalidRange(f"Expected a (start, end) pair, got {range_!r}") from e

    start = _parse_bound(raw_start, "start")
    end = _parse_bound(raw_end, "end")

    if start > end:
        raise InvalidRange(f"Range start {start} is after end {end}")

    if period is not None:
        _check_representable(period, start, end)

    if isinstance(range_, DateRange) and (start, end) == (range_.start, range_.end):
        return range_
    return DateRange(start, end)


def _check_representable(period: Period, start: date, end: date) -> None:
    try:
        period.start_of(start)
        period.end_of(end)
    except (OverflowError, ValueError) as e:
        raise InvalidRange(
            f"Range {start} to {end} has periods outside the supported calendar"
        ) from e


def _parse_bound(value: Any, name: str) -> date:
    try:
        return coerce_date(value)
    except (TypeError, ValueError) as e:
        raise InvalidRange(f"Range {name} is not a calendar date: {value!r}") from e
