"""Next day-of-month lookup.

Internal module - use find_next_day_of_month() from next_matching_day
instead.
"""

from __future__ import annotations

import logging

from next_matching_day._internal.calendar import days_in_month, next_month
from next_matching_day._internal.constants import MAX_DAY_OF_MONTH, MONTHS_PER_YEAR
from next_matching_day._internal.validation import validate_range
from next_matching_day.core.date import CalendarDate
from next_matching_day.errors import MatchingError

log = logging.getLogger(__name__)


@validate_range(target_day=(1, MAX_DAY_OF_MONTH))
def find_next_day_of_month(reference_date: CalendarDate, target_day: int) -> CalendarDate:
    """Return the next date strictly after ``reference_date`` on day ``target_day``.

    If the day is still ahead in the reference month, that date is
    returned. Otherwise the following months are searched for the first
    one long enough to contain the day; months too short are skipped,
    never clamped. A target equal to the reference day is never matched
    in the reference month.

    Every day from 1 to 31 appears at least once in any 12 consecutive
    months, so the search always ends within a year.

    Args:
        reference_date: The starting date.
        target_day: The target day of the month (1-31).

    Returns:
        The next date with the given day of the month.

    Raises:
        InvalidArgumentError: If target_day is outside 1-31.

    Examples:
        >>> find_next_day_of_month(CalendarDate(2023, 10, 15), 20)
        CalendarDate(2023, 10, 20)

        >>> find_next_day_of_month(CalendarDate(2023, 1, 31), 31)  # skips February
        CalendarDate(2023, 3, 31)
    """
    year, month, day = reference_date.to_tuple()

    if target_day > day and target_day <= days_in_month(year, month):
        result = CalendarDate(year, month, target_day)
        log.debug("next day %d after %s is %s (same month)", target_day, reference_date, result)
        return result

    for _ in range(MONTHS_PER_YEAR):
        year, month = next_month(year, month)
        if target_day <= days_in_month(year, month):
            result = CalendarDate(year, month, target_day)
            log.debug("next day %d after %s is %s", target_day, reference_date, result)
            return result
        log.debug("skipping %d-%02d: no day %d", year, month, target_day)

    # Should never reach here for a validated target_day
    raise MatchingError(f"no month with day {target_day} after {reference_date}")


__all__ = ["find_next_day_of_month"]
