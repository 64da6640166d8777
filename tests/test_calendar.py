"""Tests for the internal calendar arithmetic."""

from __future__ import annotations

import datetime

import pytest

from next_matching_day._internal.calendar import (
    days_in_month,
    is_leap_year,
    next_month,
    next_ymd,
    ordinal_to_weekday,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from next_matching_day.errors import InvalidArgumentError


class TestIsLeapYear:
    """Tests for the Gregorian leap year rule."""

    def test_divisible_by_4(self) -> None:
        assert is_leap_year(2024)
        assert is_leap_year(1996)

    def test_not_divisible_by_4(self) -> None:
        assert not is_leap_year(2023)
        assert not is_leap_year(2025)

    def test_century_not_leap(self) -> None:
        assert not is_leap_year(1900)
        assert not is_leap_year(2100)

    def test_divisible_by_400(self) -> None:
        assert is_leap_year(2000)
        assert is_leap_year(1600)

    def test_year_zero_and_negative(self) -> None:
        """Year 0 (1 BCE) is a leap year in astronomical numbering."""
        assert is_leap_year(0)
        assert is_leap_year(-4)
        assert not is_leap_year(-1)
        assert not is_leap_year(-100)
        assert is_leap_year(-400)


class TestDaysInMonth:
    """Tests for month lengths."""

    def test_31_day_months(self) -> None:
        for month in (1, 3, 5, 7, 8, 10, 12):
            assert days_in_month(2023, month) == 31

    def test_30_day_months(self) -> None:
        for month in (4, 6, 9, 11):
            assert days_in_month(2023, month) == 30

    def test_february(self) -> None:
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2024, 2) == 29
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2000, 2) == 29

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_invalid_month(self, month: int) -> None:
        with pytest.raises(InvalidArgumentError, match="month must be between 1 and 12"):
            days_in_month(2023, month)

    def test_year_lengths(self) -> None:
        assert sum(days_in_month(2023, m) for m in range(1, 13)) == 365
        assert sum(days_in_month(2024, m) for m in range(1, 13)) == 366

    @pytest.mark.parametrize("month", [2.0, "2", None, True])
    def test_non_integer_month(self, month: object) -> None:
        with pytest.raises(InvalidArgumentError, match="month must be an integer"):
            days_in_month(2023, month)  # type: ignore[arg-type]


class TestOrdinals:
    """Tests for ordinal day counts."""

    def test_ordinal_1_is_year_1(self) -> None:
        assert ymd_to_ordinal(1, 1, 1) == 1
        assert ordinal_to_ymd(1) == (1, 1, 1)

    def test_ordinal_0_is_end_of_year_0(self) -> None:
        assert ymd_to_ordinal(0, 12, 31) == 0
        assert ordinal_to_ymd(0) == (0, 12, 31)

    def test_matches_stdlib(self) -> None:
        """Ordinals agree with datetime.date.toordinal()."""
        for year in (1, 4, 100, 400, 1600, 1899, 1900, 2000, 2023, 2024, 9999):
            for month in range(1, 13):
                for day in (1, days_in_month(year, month)):
                    expected = datetime.date(year, month, day).toordinal()
                    assert ymd_to_ordinal(year, month, day) == expected
                    assert ordinal_to_ymd(expected) == (year, month, day)

    def test_cycle_boundaries(self) -> None:
        """Last days of 4-year and 400-year cycles."""
        for ymd in [(2000, 12, 31), (2004, 12, 31), (2400, 12, 31), (1996, 12, 31)]:
            assert ordinal_to_ymd(ymd_to_ordinal(*ymd)) == ymd

    def test_negative_years(self) -> None:
        for ymd in [(-1, 1, 1), (-4, 2, 29), (-400, 12, 31), (-44, 3, 15), (-10000, 6, 1)]:
            assert ordinal_to_ymd(ymd_to_ordinal(*ymd)) == ymd

    def test_consecutive_ordinals_around_year_zero(self) -> None:
        prev = ordinal_to_ymd(-800)
        for ordinal in range(-799, 800):
            current = ordinal_to_ymd(ordinal)
            assert current == next_ymd(*prev)
            prev = current

    def test_large_years(self) -> None:
        ymd = (123_456, 2, 29)
        assert is_leap_year(123_456)
        assert ordinal_to_ymd(ymd_to_ordinal(*ymd)) == ymd


class TestWeekday:
    """Tests for weekday derivation."""

    def test_known_dates(self) -> None:
        assert ordinal_to_weekday(ymd_to_ordinal(2023, 10, 15)) == 6  # Sunday
        assert ordinal_to_weekday(ymd_to_ordinal(2023, 10, 16)) == 0  # Monday
        assert ordinal_to_weekday(ymd_to_ordinal(2024, 2, 29)) == 3  # Thursday

    def test_matches_stdlib(self, reference_days: list[datetime.date]) -> None:
        for d in reference_days:
            assert ordinal_to_weekday(d.toordinal()) == d.weekday()

    def test_before_year_one(self) -> None:
        """0000-12-31 is the Sunday before 0001-01-01."""
        assert ordinal_to_weekday(0) == 6


class TestStepping:
    """Tests for day and month stepping."""

    def test_next_ymd_within_month(self) -> None:
        assert next_ymd(2023, 10, 15) == (2023, 10, 16)

    def test_next_ymd_month_rollover(self) -> None:
        assert next_ymd(2023, 4, 30) == (2023, 5, 1)
        assert next_ymd(2023, 2, 28) == (2023, 3, 1)

    def test_next_ymd_leap_day(self) -> None:
        assert next_ymd(2024, 2, 28) == (2024, 2, 29)
        assert next_ymd(2024, 2, 29) == (2024, 3, 1)

    def test_next_ymd_year_rollover(self) -> None:
        assert next_ymd(2023, 12, 31) == (2024, 1, 1)
        assert next_ymd(-1, 12, 31) == (0, 1, 1)

    def test_next_month(self) -> None:
        assert next_month(2023, 1) == (2023, 2)
        assert next_month(2023, 12) == (2024, 1)
