"""Range remapping when the display scale changes."""

from calgrid.logging import get_logger
from calgrid.periods import period_for
from calgrid.types import DateRange, Scale

_log = get_logger(__name__)


def convert_scale(
    from_scale: Scale | str,
    range_: DateRange,
    column_count: int,
    to_scale: Scale | str,
) -> DateRange:
    """Recompute a range so ``to_scale`` shows ``column_count`` columns.

    The start is kept and the end becomes ``start + (column_count - 1)``
    increments of the target scale: 1 day, 7 days, one calendar month or
    one calendar year. Month and year steps clamp to the target month's
    length. The visible time span is not preserved, only the column count.

    The range is not validated; callers validate before converting.

    Raises:
        ValueError: If column_count is below 1.
    """
    from_scale = Scale(from_scale)
    to_scale = Scale(to_scale)
    if from_scale is to_scale:
        return range_
    if column_count < 1:
        raise ValueError(f"column_count must be at least 1, got {column_count}")

    end = period_for(to_scale).shift(range_.start, column_count - 1)
    _log.debug(
        "scale_converted",
        from_scale=from_scale.value,
        to_scale=to_scale.value,
        column_count=column_count,
        end=end.isoformat(),
    )
    return DateRange(range_.start, end)


def shift_range(range_: DateRange, scale: Scale | str, periods: int) -> DateRange:
    """Move both bounds by ``periods`` increments of ``scale``.

    Positive periods move forward, negative backward.
    """
    period = period_for(scale)
    return DateRange(
        period.shift(range_.start, periods), period.shift(range_.end, periods)
    )
