"""Argument checks for next_matching_day.

Every public entry point rejects bad input here, before any date is
built or searched. Failures raise InvalidArgumentError carrying the
parameter name and the rejected value.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, TypeVar, ParamSpec

from next_matching_day._internal.constants import MONTHS_PER_YEAR, REFERENCE_LEAP_YEAR
from next_matching_day.errors import InvalidArgumentError

P = ParamSpec("P")
T = TypeVar("T")


def validate_integer(value: Any, *, argument: str) -> None:
    """Reject anything that is not a plain int.

    bool is an int subclass but never a meaningful calendar component,
    so it is rejected too.

    Raises:
        InvalidArgumentError: If value is not an int, or is a bool.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{argument} must be an integer, got {type(value).__name__} {value!r}",
            argument=argument,
            value=value,
        )


def _check_bounds(value: int, low: int, high: int, *, argument: str, context: str = "") -> None:
    validate_integer(value, argument=argument)
    if value < low or value > high:
        raise InvalidArgumentError(
            f"{argument} must be between {low} and {high}{context}, got {value}",
            argument=argument,
            value=value,
        )


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator checking that integer parameters fall in inclusive bounds.

    Parameters are matched by name whether passed positionally or by
    keyword. A named parameter must be an int within its (low, high)
    bounds.

    Examples:
        >>> @validate_range(target_day=(1, 31))
        ... def find(reference, target_day: int) -> None:
        ...     pass

        >>> find(None, 32)
        Traceback (most recent call last):
        ...
        InvalidArgumentError: target_day must be between 1 and 31, got 32
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = signature.bind_partial(*args, **kwargs).arguments
            for name, (low, high) in limits.items():
                if name in bound:
                    _check_bounds(bound[name], low, high, argument=name)
            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_month(month: int, *, argument: str = "month") -> None:
    """Check that month is an int in 1-12.

    Raises:
        InvalidArgumentError: If month is not an int or is out of range.
    """
    _check_bounds(month, 1, MONTHS_PER_YEAR, argument=argument)


def validate_day(year: int, month: int, day: int, *, argument: str = "day") -> None:
    """Check that day exists in the given month of the given year.

    Raises:
        InvalidArgumentError: If day is not an int or the month is too short.
    """
    from next_matching_day._internal.calendar import days_in_month

    validate_integer(day, argument=argument)
    max_day = days_in_month(year, month)
    _check_bounds(day, 1, max_day, argument=argument, context=f" for {year}-{month:02d}")


def validate_month_day(month: int, day: int) -> None:
    """Check a month/day pair that recurs in at least some years.

    The day is measured against the month's length in a leap year, so
    February 29 passes while February 30 or April 31 do not.

    Raises:
        InvalidArgumentError: If the month or the day is invalid.
    """
    from next_matching_day._internal.calendar import days_in_month

    validate_month(month, argument="target_month")
    validate_integer(day, argument="target_day")
    max_day = days_in_month(REFERENCE_LEAP_YEAR, month)
    _check_bounds(day, 1, max_day, argument="target_day", context=f" for month {month}")


__all__ = [
    "validate_integer",
    "validate_range",
    "validate_month",
    "validate_day",
    "validate_month_day",
]
