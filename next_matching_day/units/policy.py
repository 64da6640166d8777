"""LeapDayPolicy enumeration.

February 29 only exists in leap years, so an annual search for it may
have no match in the next year. The policy decides what happens then.
"""

from __future__ import annotations

from enum import Enum


class LeapDayPolicy(Enum):
    """How annual searches treat a February 29 target.

    NEXT_LEAP_YEAR:
        Skip forward to the next leap year. With Gregorian rules this
        is at most eight years ahead (1896 -> 1904).
    STRICT:
        Only the reference year and the following year are searched.
        If neither has a February 29 after the reference date, the
        search fails with InvalidArgumentError.

    Examples:
        >>> LeapDayPolicy("strict")
        <LeapDayPolicy.STRICT: 'strict'>
    """

    NEXT_LEAP_YEAR = "next_leap_year"
    STRICT = "strict"


__all__ = ["LeapDayPolicy"]
