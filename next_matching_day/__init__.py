"""next_matching_day: find the next date matching a calendar criterion.

Given a reference date, next_matching_day finds the earliest later date
that falls on a weekday, on a day of the month, or on a month/day
combination that recurs every year. All calculations use the proleptic
Gregorian calendar.

Core Types:
    CalendarDate: Calendar date (year, month, day)

Units:
    Weekday: Day of the week (Monday=0 .. Sunday=6)
    LeapDayPolicy: February 29 handling for annual searches

Matchers:
    find_next_weekday: Next date on a weekday
    find_next_day_of_month: Next date on a day of the month
    find_next_annual_date: Next date on a month and day

Calendar Functions:
    is_leap_year: Gregorian leap year test
    days_in_month: Number of days in a month

Exceptions:
    MatchingError: Base exception
    InvalidArgumentError: Invalid input values

Example:
    >>> from next_matching_day import CalendarDate, Weekday, find_next_weekday
    >>> find_next_weekday(CalendarDate(2023, 10, 15), Weekday.MONDAY)
    CalendarDate(2023, 10, 16)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from next_matching_day.core.date import CalendarDate

# Units
from next_matching_day.units.policy import LeapDayPolicy
from next_matching_day.units.weekday import Weekday

# Matchers
from next_matching_day.match import (
    find_next_annual_date,
    find_next_day_of_month,
    find_next_weekday,
)

# Calendar functions
from next_matching_day._internal.calendar import days_in_month, is_leap_year

# Exceptions
from next_matching_day.errors import InvalidArgumentError, MatchingError

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDate",
    # Units
    "LeapDayPolicy",
    "Weekday",
    # Matchers
    "find_next_annual_date",
    "find_next_day_of_month",
    "find_next_weekday",
    # Calendar functions
    "days_in_month",
    "is_leap_year",
    # Exceptions
    "MatchingError",
    "InvalidArgumentError",
]
