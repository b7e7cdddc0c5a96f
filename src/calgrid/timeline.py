"""Per-scale timeline state for the UI layer.

Each scale remembers its own range, column count and range type. Switching
scale derives the target scale's range from the active one through
``convert_scale`` so the number of visible columns carries over. All
transitions return new objects.
"""

from dataclasses import dataclass, replace
from datetime import date
from typing import Any

from calgrid.config import get_calgrid_config
from calgrid.convert import convert_scale
from calgrid.dates import coerce_date, end_of_week, start_of_week
from calgrid.logging import get_logger
from calgrid.segment import segment
from calgrid.types import (
    Column,
    DateRange,
    DayFilterMode,
    RangeType,
    Scale,
    WeekNumberingScheme,
)
from calgrid.week_numbers import week_start_weekday

_log = get_logger(__name__)


def default_range(
    today: date,
    scheme: WeekNumberingScheme | str = WeekNumberingScheme.ISO,
) -> DateRange:
    """The week holding ``today``, starting on the scheme's week-start day.

    ``today`` is always supplied by the caller; nothing here reads the clock.
    """
    week_start = week_start_weekday(scheme)
    return DateRange(start_of_week(today, week_start), end_of_week(today, week_start))


@dataclass(frozen=True)
class ScaleState:
    """Range settings remembered for one scale."""

    range: DateRange
    column_count: int
    range_type: RangeType = RangeType.CUSTOM


@dataclass(frozen=True)
class TimelineState:
    """Active scale, numbering scheme, day filter and per-scale ranges.

    Per-scale states are (scale, state) pairs in ``Scale`` order; ``states``
    returns them as a dict. States are hashable and compare by value.
    """

    scale: Scale
    scheme: WeekNumberingScheme
    day_filter: DayFilterMode
    scale_states: tuple[tuple[Scale, ScaleState], ...] = ()

    @classmethod
    def initial(
        cls,
        today: date,
        scheme: WeekNumberingScheme | str | None = None,
        day_filter: DayFilterMode | str | None = None,
        scale: Scale | str | None = None,
    ) -> "TimelineState":
        """Build the starting state from configured defaults.

        Every scale starts on the Monday-start week holding ``today``; Week
        scale picks its range as a whole week.
        """
        config = get_calgrid_config()
        week = default_range(today)
        scale_states = tuple(
            (
                s,
                ScaleState(
                    range=week,
                    column_count=config.default_column_counts[s],
                    range_type=RangeType.WEEK if s is Scale.WEEK else RangeType.CUSTOM,
                ),
            )
            for s in Scale
        )
        return cls(
            scale=Scale(scale if scale is not None else config.default_scale),
            scheme=WeekNumberingScheme(
                scheme if scheme is not None else config.default_scheme
            ),
            day_filter=DayFilterMode(
                day_filter if day_filter is not None else config.default_day_filter
            ),
            scale_states=scale_states,
        )

    @property
    def states(self) -> dict[Scale, ScaleState]:
        """A fresh dict of the per-scale states."""
        return dict(self.scale_states)

    @property
    def current(self) -> ScaleState:
        return self.states[self.scale]

    def _with_state(
        self, scale: Scale, state: ScaleState
    ) -> tuple[tuple[Scale, ScaleState], ...]:
        states = {**self.states, scale: state}
        return tuple((s, states[s]) for s in Scale if s in states)

    def switch_scale(self, to_scale: Scale | str) -> "TimelineState":
        """Activate another scale, carrying over the column count.

        The target keeps its own range type; its range and column count are
        recomputed from the active scale's state.
        """
        to_scale = Scale(to_scale)
        if to_scale is self.scale:
            return self

        source = self.current
        new_range = convert_scale(
            self.scale, source.range, source.column_count, to_scale
        )
        target = replace(
            self.states[to_scale],
            range=new_range,
            column_count=source.column_count,
        )
        _log.info(
            "scale_switched",
            from_scale=self.scale.value,
            to_scale=to_scale.value,
            start=new_range.start.isoformat(),
            end=new_range.end.isoformat(),
            column_count=source.column_count,
        )
        return replace(
            self, scale=to_scale, scale_states=self._with_state(to_scale, target)
        )

    def update(
        self,
        start: Any = None,
        end: Any = None,
        range_type: RangeType | str | None = None,
        column_count: int | None = None,
        scheme: WeekNumberingScheme | str | None = None,
        day_filter: DayFilterMode | str | None = None,
    ) -> "TimelineState":
        """Return a new state with the given values changed.

        Range bounds, range type and column count apply to the active scale.
        An inverted range is accepted here and rejected when columns are built.

        Raises:
            ValueError: If a bound is not a date, column_count is below 1 or
                an enum value is unknown.
        """
        current = self.current
        new_range = current.range
        if start is not None or end is not None:
            new_range = DateRange(
                coerce_date(start) if start is not None else current.range.start,
                coerce_date(end) if end is not None else current.range.end,
            )
        if column_count is not None and column_count < 1:
            raise ValueError(f"column_count must be at least 1, got {column_count}")

        updated = ScaleState(
            range=new_range,
            column_count=column_count if column_count is not None else current.column_count,
            range_type=RangeType(range_type) if range_type is not None else current.range_type,
        )
        return replace(
            self,
            scheme=WeekNumberingScheme(scheme) if scheme is not None else self.scheme,
            day_filter=(
                DayFilterMode(day_filter) if day_filter is not None else self.day_filter
            ),
            scale_states=self._with_state(self.scale, updated),
        )

    def columns(self) -> list[Column]:
        """Segment the active scale's range.

        Raises:
            InvalidRange: If the active range is inverted.
        """
        return segment(self.current.range, self.scale, self.scheme, self.day_filter)
