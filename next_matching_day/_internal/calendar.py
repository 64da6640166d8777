"""Calendar utilities for next_matching_day.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap year logic, month lengths, ordinal day counts and
weekday derivation.

Ordinal 1 = 0001-01-01 (a Monday). Ordinals are plain integers, so every
integer year is representable, including year 0 and negative years.

This module is not part of the public API.
"""

from __future__ import annotations

from next_matching_day._internal.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_100_YEARS,
    DAYS_IN_400_YEARS,
    DAYS_IN_4_YEARS,
    DAYS_IN_MONTH,
    DAYS_PER_WEEK,
    MONTHS_PER_YEAR,
)
from next_matching_day._internal.validation import validate_month


def is_leap_year(year: int) -> bool:
    """Return True if February has 29 days in ``year``.

    Gregorian rule: every fourth year, except century years that are
    not multiples of 400. Holds for year 0 and negative years too.

    Examples:
        >>> is_leap_year(2024), is_leap_year(1900), is_leap_year(2000)
        (True, False, True)
    """
    if year % 100 == 0:
        return year % 400 == 0
    return year % 4 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the length of ``month`` in ``year`` (28 to 31).

    Raises:
        InvalidArgumentError: If month is not an int in 1-12.

    Examples:
        >>> days_in_month(2024, 2), days_in_month(2023, 2)
        (29, 28)
    """
    validate_month(month)
    leap_day = 1 if month == 2 and is_leap_year(year) else 0
    return DAYS_IN_MONTH[month] + leap_day


def _leading_days(year: int, month: int) -> int:
    """Days elapsed in ``year`` before the first of ``month``."""
    leap_day = 1 if month > 2 and is_leap_year(year) else 0
    return DAYS_BEFORE_MONTH[month] + leap_day


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Count days from 0001-01-01 (ordinal 1) to the given date.

    0000-12-31 maps to 0 and earlier dates go negative. Floor division
    keeps the leap-day count correct on both sides of year 1.
    """
    prior = year - 1
    leap_days = prior // 4 - prior // 100 + prior // 400
    return prior * 365 + leap_days + _leading_days(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal day number to year, month, day.

    The proleptic calendar repeats every 400 years, and divmod floors
    toward negative infinity, so the cycle reduction below works for
    ordinals on either side of year 1.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> ordinal_to_ymd(1)
        (1, 1, 1)
        >>> ordinal_to_ymd(0)
        (0, 12, 31)
    """
    n = ordinal - 1

    n400, n = divmod(n, DAYS_IN_400_YEARS)
    n100, n = divmod(n, DAYS_IN_100_YEARS)
    n4, n = divmod(n, DAYS_IN_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a 4-year or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-indexed day-of-year to month and day."""
    for month in range(1, MONTHS_PER_YEAR + 1):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    # Should never reach here for a valid doy
    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def ordinal_to_weekday(ordinal: int) -> int:
    """Convert an ordinal to day of week (Monday=0, Sunday=6).

    Ordinal 1 (0001-01-01) was a Monday in the proleptic calendar.

    Examples:
        >>> ordinal_to_weekday(1)
        0
    """
    return (ordinal - 1) % DAYS_PER_WEEK


def next_ymd(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Advance one calendar day, rolling the month and year as needed.

    Examples:
        >>> next_ymd(2024, 2, 28)
        (2024, 2, 29)
        >>> next_ymd(2023, 12, 31)
        (2024, 1, 1)
    """
    if day < days_in_month(year, month):
        return (year, month, day + 1)
    year, month = next_month(year, month)
    return (year, month, 1)


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return the (year, month) following the given month.

    Examples:
        >>> next_month(2023, 12)
        (2024, 1)
    """
    if month == MONTHS_PER_YEAR:
        return (year + 1, 1)
    return (year, month + 1)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ordinal_to_weekday",
    "next_ymd",
    "next_month",
]
