"""Tests for date range validation."""

from datetime import date, datetime

import pytest

from calgrid import (
    DateRange,
    InvalidRange,
    MonthPeriod,
    ValidationError,
    WeekPeriod,
    validate_range,
)


class TestValidateRange:
    """Test validate_range function."""

    def test_valid_range_returned_unchanged(self):
        """A range already holding ordered dates is returned as is."""
        r = DateRange(date(2024, 1, 1), date(2024, 1, 7))
        assert validate_range(r) is r

    def test_single_day_range(self):
        r = DateRange(date(2024, 1, 1), date(2024, 1, 1))
        assert validate_range(r) == r

    def test_string_bounds_parsed(self):
        """ISO string bounds become dates."""
        result = validate_range(("2024-01-01", "2024-01-07"))
        assert result == DateRange(date(2024, 1, 1), date(2024, 1, 7))

    def test_datetime_bounds_truncated(self):
        result = validate_range(DateRange(datetime(2024, 1, 1, 12), datetime(2024, 1, 2)))
        assert result == DateRange(date(2024, 1, 1), date(2024, 1, 2))
        assert type(result.start) is date

    def test_inverted_range(self):
        """start > end raises InvalidRange."""
        with pytest.raises(InvalidRange, match="after"):
            validate_range(DateRange(date(2024, 3, 10), date(2024, 3, 1)))

    def test_unparseable_start(self):
        with pytest.raises(InvalidRange, match="start"):
            validate_range(("2024-13-01", "2024-12-31"))

    def test_unparseable_end(self):
        with pytest.raises(InvalidRange, match="end"):
            validate_range(("2024-01-01", None))

    def test_not_a_pair(self):
        with pytest.raises(InvalidRange, match="pair"):
            validate_range(42)  # type: ignore

    def test_week_past_max_date(self):
        with pytest.raises(InvalidRange, match="outside the supported calendar"):
            validate_range((date(9999, 12, 28), date.max), WeekPeriod("iso"))

    def test_week_before_min_date(self):
        with pytest.raises(InvalidRange):
            validate_range((date.min, date(1, 1, 3)), WeekPeriod("us"))

    def test_representable_period_accepted(self):
        r = DateRange(date(9999, 12, 1), date.max)
        assert validate_range(r, MonthPeriod()) is r

    def test_period_check_is_opt_in(self):
        r = DateRange(date(9999, 12, 28), date.max)
        assert validate_range(r) is r

    def test_error_hierarchy(self):
        """InvalidRange is a ValidationError and a ValueError."""
        assert issubclass(InvalidRange, ValidationError)
        assert issubclass(InvalidRange, ValueError)


class TestDateRange:
    """Test DateRange helpers."""

    def test_parse(self):
        assert DateRange.parse("2024-02-28", date(2024, 3, 1)).days == 3

    def test_parse_rejects_inverted(self):
        with pytest.raises(InvalidRange):
            DateRange.parse("2024-03-02", "2024-03-01")

    def test_contains(self):
        r = DateRange(date(2024, 1, 1), date(2024, 1, 7))
        assert r.contains(date(2024, 1, 7))
        assert not r.contains(date(2024, 1, 8))

    def test_immutable(self):
        r = DateRange(date(2024, 1, 1), date(2024, 1, 7))
        with pytest.raises(AttributeError):
            r.start = date(2024, 1, 2)  # type: ignore
