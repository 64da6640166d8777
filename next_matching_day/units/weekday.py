"""Weekday enumeration.

This module provides the Weekday enum with a fixed Monday=0 ordinal
assignment used for forward-offset arithmetic.
"""

from __future__ import annotations

from enum import Enum

from next_matching_day._internal.constants import DAYS_PER_WEEK
from next_matching_day.errors import InvalidArgumentError


class Weekday(Enum):
    """Day of the week.

    Values follow the Monday=0 through Sunday=6 convention, matching
    Python's datetime.date.weekday().

    Examples:
        >>> Weekday.MONDAY.value
        0
        >>> Weekday.from_ordinal(6)
        <Weekday.SUNDAY: 6>
        >>> Weekday.SUNDAY.days_until(Weekday.MONDAY)
        1
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Weekday:
        """Return the Weekday for an ordinal in 0-6.

        Raises:
            InvalidArgumentError: If ordinal is outside 0-6.
        """
        if ordinal < 0 or ordinal >= DAYS_PER_WEEK:
            raise InvalidArgumentError(
                f"weekday must be between 0 and {DAYS_PER_WEEK - 1}, got {ordinal}",
                argument="weekday",
                value=ordinal,
            )
        return cls(ordinal)

    def days_until(self, other: Weekday) -> int:
        """Return the forward distance in days to the next ``other``.

        The distance is always in 1-7: a weekday is seven days away
        from itself, never zero.

        Examples:
            >>> Weekday.MONDAY.days_until(Weekday.MONDAY)
            7
            >>> Weekday.THURSDAY.days_until(Weekday.WEDNESDAY)
            6
        """
        return (other.value - self.value - 1) % DAYS_PER_WEEK + 1


__all__ = ["Weekday"]
