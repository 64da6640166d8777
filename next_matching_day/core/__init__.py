"""Core calendar types.

This module provides:
    - CalendarDate: Calendar date in the proleptic Gregorian calendar
"""

from __future__ import annotations

from next_matching_day.core.date import CalendarDate

__all__: list[str] = [
    "CalendarDate",
]
