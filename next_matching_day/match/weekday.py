"""Next-weekday lookup.

Internal module - use find_next_weekday() from next_matching_day instead.
"""

from __future__ import annotations

import logging

from next_matching_day.core.date import CalendarDate
from next_matching_day.units.weekday import Weekday

log = logging.getLogger(__name__)


def find_next_weekday(reference_date: CalendarDate, target_weekday: Weekday) -> CalendarDate:
    """Return the next date strictly after ``reference_date`` on ``target_weekday``.

    If the reference date already falls on the target weekday, the same
    weekday of the following week is returned. The result is always
    between 1 and 7 days after the reference date.

    Args:
        reference_date: The starting date.
        target_weekday: The weekday to look for.

    Returns:
        The next date with the given weekday.

    Raises:
        TypeError: If target_weekday is not a Weekday.

    Examples:
        >>> sunday = CalendarDate(2023, 10, 15)
        >>> find_next_weekday(sunday, Weekday.MONDAY)
        CalendarDate(2023, 10, 16)

        >>> monday = CalendarDate(2023, 10, 16)
        >>> find_next_weekday(monday, Weekday.MONDAY)
        CalendarDate(2023, 10, 23)
    """
    if not isinstance(target_weekday, Weekday):
        raise TypeError(
            f"target_weekday must be a Weekday, got {type(target_weekday).__name__}"
        )

    offset = reference_date.weekday.days_until(target_weekday)
    result = reference_date.add_days(offset)
    log.debug(
        "next %s after %s is %s (+%d days)",
        target_weekday.name,
        reference_date,
        result,
        offset,
    )
    return result


__all__ = ["find_next_weekday"]
