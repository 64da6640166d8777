"""Next annual month/day lookup.

Internal module - use find_next_annual_date() from next_matching_day
instead.
"""

from __future__ import annotations

import logging

from next_matching_day._internal.calendar import days_in_month
from next_matching_day._internal.constants import MAX_LEAP_YEAR_GAP
from next_matching_day._internal.validation import validate_month_day
from next_matching_day.core.date import CalendarDate
from next_matching_day.errors import InvalidArgumentError, MatchingError
from next_matching_day.units.policy import LeapDayPolicy

log = logging.getLogger(__name__)


def _coerce_policy(policy: LeapDayPolicy | str) -> LeapDayPolicy:
    if isinstance(policy, LeapDayPolicy):
        return policy
    try:
        return LeapDayPolicy(policy)
    except ValueError:
        choices = ", ".join(p.value for p in LeapDayPolicy)
        raise InvalidArgumentError(
            f"leap_day_policy must be one of {choices}, got {policy!r}",
            argument="leap_day_policy",
            value=policy,
        ) from None


def find_next_annual_date(
    reference_date: CalendarDate,
    target_month: int,
    target_day: int,
    *,
    leap_day_policy: LeapDayPolicy | str = LeapDayPolicy.NEXT_LEAP_YEAR,
) -> CalendarDate:
    """Return the next date strictly after ``reference_date`` on ``target_month``/``target_day``.

    The date in the reference year is returned if it is still ahead,
    otherwise the date in the following year. For every target except
    February 29 the result is therefore never more than one year out.

    February 29 is only valid in leap years. With
    LeapDayPolicy.NEXT_LEAP_YEAR (the default) the search continues to
    the next leap year; with LeapDayPolicy.STRICT it fails instead.

    Args:
        reference_date: The starting date.
        target_month: The target month (1-12).
        target_day: The target day, valid for the month in a leap year.
        leap_day_policy: February 29 handling when the following year
            is not a leap year. Accepts the enum or its string value.

    Returns:
        The next date with the given month and day.

    Raises:
        InvalidArgumentError: If target_month is outside 1-12, if
            target_day does not exist in that month, or if February 29
            has no occurrence in the next year under LeapDayPolicy.STRICT.

    Examples:
        >>> find_next_annual_date(CalendarDate(2023, 5, 15), 6, 20)
        CalendarDate(2023, 6, 20)

        >>> find_next_annual_date(CalendarDate(2023, 8, 1), 7, 1)
        CalendarDate(2024, 7, 1)

        >>> find_next_annual_date(CalendarDate(2024, 3, 20), 2, 29)
        CalendarDate(2028, 2, 29)
    """
    validate_month_day(target_month, target_day)
    policy = _coerce_policy(leap_day_policy)

    year = reference_date.year
    if target_day <= days_in_month(year, target_month):
        candidate = CalendarDate(year, target_month, target_day)
        if candidate > reference_date:
            log.debug(
                "next %02d-%02d after %s is %s (same year)",
                target_month,
                target_day,
                reference_date,
                candidate,
            )
            return candidate

    horizon = 1 if policy is LeapDayPolicy.STRICT else MAX_LEAP_YEAR_GAP
    for offset in range(1, horizon + 1):
        if target_day <= days_in_month(year + offset, target_month):
            result = CalendarDate(year + offset, target_month, target_day)
            log.debug(
                "next %02d-%02d after %s is %s",
                target_month,
                target_day,
                reference_date,
                result,
            )
            return result
        log.debug("skipping %d: not a leap year", year + offset)

    if policy is LeapDayPolicy.STRICT:
        raise InvalidArgumentError(
            f"February 29 target with no valid next occurrence after {reference_date}: "
            f"{year + 1} is not a leap year",
            argument="target_day",
            value=target_day,
        )

    # Should never reach here: leap years are at most MAX_LEAP_YEAR_GAP apart
    raise MatchingError(
        f"no {target_month:02d}-{target_day:02d} within {horizon} years of {reference_date}"
    )


__all__ = ["find_next_annual_date"]
