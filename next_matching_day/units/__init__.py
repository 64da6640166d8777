"""Calendar units and enumerations.

This module provides:
    - Weekday: Day of the week (Monday=0 .. Sunday=6)
    - LeapDayPolicy: February 29 handling for annual searches
"""

from __future__ import annotations

from next_matching_day.units.policy import LeapDayPolicy
from next_matching_day.units.weekday import Weekday

__all__: list[str] = [
    "LeapDayPolicy",
    "Weekday",
]
