"""Next-occurrence lookups.

This module provides the three date matchers:
    - find_next_weekday: Next date on a given weekday
    - find_next_day_of_month: Next date on a given day of the month
    - find_next_annual_date: Next date on a given month and day

Each returns a date strictly after the reference date.
"""

from __future__ import annotations

from next_matching_day.match.annual import find_next_annual_date
from next_matching_day.match.day_of_month import find_next_day_of_month
from next_matching_day.match.weekday import find_next_weekday

__all__: list[str] = [
    "find_next_annual_date",
    "find_next_day_of_month",
    "find_next_weekday",
]
