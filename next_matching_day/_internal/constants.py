"""Internal constants for next_matching_day.

These constants define the calendar limits and search horizons used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12

# No month in any calendar year has more days than this
MAX_DAY_OF_MONTH: int = 31

# Longest run of years between two Gregorian leap years (e.g. 1896 -> 1904)
MAX_LEAP_YEAR_GAP: int = 8

# A year known to be a leap year, used for leap-safe day validation
REFERENCE_LEAP_YEAR: int = 2000

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days before each month (cumulative), for non-leap years
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)

# Day counts of the Gregorian cycles
DAYS_IN_400_YEARS: int = 146_097
DAYS_IN_100_YEARS: int = 36_524
DAYS_IN_4_YEARS: int = 1_461


__all__ = [
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    "MAX_DAY_OF_MONTH",
    "MAX_LEAP_YEAR_GAP",
    "REFERENCE_LEAP_YEAR",
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
    "DAYS_IN_400_YEARS",
    "DAYS_IN_100_YEARS",
    "DAYS_IN_4_YEARS",
]
