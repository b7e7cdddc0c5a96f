"""Tests for per-scale timeline state."""

from datetime import date

import pytest

from calgrid import (
    DateRange,
    DayFilterMode,
    InvalidRange,
    RangeType,
    Scale,
    TimelineState,
    WeekNumberingScheme,
    configure_calgrid,
    default_range,
)

TODAY = date(2024, 1, 3)  # Wednesday


class TestDefaultRange:
    """Test the week-of-today default."""

    def test_iso_week(self):
        assert default_range(TODAY) == DateRange(date(2024, 1, 1), date(2024, 1, 7))

    def test_us_week(self):
        assert default_range(TODAY, "us") == DateRange(
            date(2023, 12, 31), date(2024, 1, 6)
        )


class TestInitialState:
    """Test TimelineState.initial."""

    def test_defaults(self):
        state = TimelineState.initial(TODAY)

        assert state.scale is Scale.DAY
        assert state.scheme is WeekNumberingScheme.ISO
        assert state.day_filter is DayFilterMode.ALL
        assert state.current.range == DateRange(date(2024, 1, 1), date(2024, 1, 7))
        assert state.current.range_type is RangeType.CUSTOM

    def test_column_counts_per_scale(self):
        state = TimelineState.initial(TODAY)

        assert {s: st.column_count for s, st in state.states.items()} == {
            Scale.DAY: 7,
            Scale.WEEK: 4,
            Scale.MONTH: 3,
            Scale.YEAR: 2,
        }
        assert state.states[Scale.WEEK].range_type is RangeType.WEEK

    def test_uses_configured_defaults(self):
        configure_calgrid(default_scheme="us", default_column_counts={"week": 6})

        state = TimelineState.initial(TODAY)

        assert state.scheme is WeekNumberingScheme.US
        assert state.states[Scale.WEEK].column_count == 6
        assert state.states[Scale.DAY].column_count == 7

    def test_explicit_arguments_win(self):
        state = TimelineState.initial(TODAY, scheme="us", day_filter="weekend", scale="month")

        assert state.scale is Scale.MONTH
        assert state.scheme is WeekNumberingScheme.US
        assert state.day_filter is DayFilterMode.WEEKEND


class TestSwitchScale:
    """Test switching the active scale."""

    def test_switch_carries_column_count(self):
        """Day with 7 columns becomes 7 week columns from the same start."""
        state = TimelineState.initial(TODAY).switch_scale(Scale.WEEK)

        assert state.scale is Scale.WEEK
        assert state.current.range == DateRange(date(2024, 1, 1), date(2024, 2, 12))
        assert state.current.column_count == 7
        assert state.current.range_type is RangeType.WEEK
        assert len(state.columns()) == 7

    def test_switch_does_not_mutate(self):
        original = TimelineState.initial(TODAY)
        original.switch_scale("year")

        assert original.scale is Scale.DAY
        assert original.states[Scale.YEAR].column_count == 2

    def test_switch_to_same_scale_is_noop(self):
        state = TimelineState.initial(TODAY)
        assert state.switch_scale("day") is state

    def test_chained_switches(self):
        state = (
            TimelineState.initial(TODAY)
            .update(column_count=3)
            .switch_scale(Scale.MONTH)
            .switch_scale(Scale.YEAR)
        )

        assert state.current.range == DateRange(date(2024, 1, 1), date(2026, 1, 1))
        assert [c.label for c in state.columns()] == ["2024", "2025", "2026"]


class TestUpdate:
    """Test TimelineState.update."""

    def test_update_range_only_touches_active_scale(self):
        state = TimelineState.initial(TODAY).update(start="2024-02-01", end="2024-02-10")

        assert state.current.range == DateRange(date(2024, 2, 1), date(2024, 2, 10))
        assert state.states[Scale.WEEK].range == DateRange(date(2024, 1, 1), date(2024, 1, 7))

    def test_update_filter_applies_to_columns(self):
        state = TimelineState.initial(TODAY).update(
            start="2024-02-01", end="2024-02-10", day_filter="business"
        )

        assert state.day_filter is DayFilterMode.BUSINESS
        assert len(state.columns()) == 7

    def test_update_one_bound(self):
        state = TimelineState.initial(TODAY).update(end=date(2024, 1, 3))
        assert state.current.range == DateRange(date(2024, 1, 1), date(2024, 1, 3))

    def test_update_range_type_and_scheme(self):
        state = TimelineState.initial(TODAY).update(range_type="week", scheme="us")

        assert state.current.range_type is RangeType.WEEK
        assert state.scheme is WeekNumberingScheme.US

    def test_bad_column_count(self):
        with pytest.raises(ValueError):
            TimelineState.initial(TODAY).update(column_count=0)

    def test_inverted_range_rejected_on_columns(self):
        state = TimelineState.initial(TODAY).update(start="2024-01-10")
        with pytest.raises(InvalidRange):
            state.columns()


class TestStateValues:
    """Test equality and hashing of timeline states."""

    def test_equal_states_hash_equal(self):
        first = TimelineState.initial(TODAY).switch_scale("month")
        second = TimelineState.initial(TODAY).switch_scale("month")

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_usable_as_dict_key(self):
        state = TimelineState.initial(TODAY)
        cache = {state: state.columns()}

        assert cache[TimelineState.initial(TODAY)] == state.columns()

    def test_changed_state_differs(self):
        state = TimelineState.initial(TODAY)
        assert state.update(column_count=5) != state

    def test_scale_states_keep_scale_order(self):
        state = TimelineState.initial(TODAY).switch_scale("year").update(column_count=4)

        assert [s for s, _ in state.scale_states] == list(Scale)

    def test_states_dict_is_a_copy(self):
        state = TimelineState.initial(TODAY)
        state.states.pop(Scale.DAY)

        assert Scale.DAY in state.states
