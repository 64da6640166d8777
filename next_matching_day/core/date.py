"""CalendarDate class representing a calendar date.

This module provides the CalendarDate class for representing calendar
dates in the proleptic Gregorian calendar.
"""

from __future__ import annotations

import datetime
from typing import Any

from next_matching_day._internal.calendar import (
    days_in_month,
    is_leap_year,
    next_ymd,
    ordinal_to_weekday,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from next_matching_day._internal.validation import (
    validate_day,
    validate_integer,
    validate_month,
)
from next_matching_day.errors import InvalidArgumentError
from next_matching_day.units.weekday import Weekday


class CalendarDate:
    """A calendar date in the proleptic Gregorian calendar.

    CalendarDate represents a specific calendar day with year, month and
    day components. Every instance is valid: construction from a raw
    triple validates the components and never normalizes them.

    Years use astronomical numbering (year 0 exists and equals 1 BCE)
    and are unbounded. Internally the date is stored as an ordinal day
    count, so day arithmetic is a single integer addition.

    Instances are immutable and hashable.

    Attributes:
        year: The year (can be zero or negative).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = CalendarDate(2023, 10, 15)
        >>> d.weekday
        <Weekday.SUNDAY: 6>
        >>> d.next_day()
        CalendarDate(2023, 10, 16)

        >>> CalendarDate(2023, 2, 29)
        Traceback (most recent call last):
        ...
        InvalidArgumentError: day must be between 1 and 28 for 2023-02, got 29
    """

    __slots__ = ("_ordinal",)

    _ordinal: int

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a CalendarDate from year, month, and day.

        Raises:
            InvalidArgumentError: If a component is not an int, or if
                month or day is out of range.
        """
        validate_integer(year, argument="year")
        validate_month(month)
        validate_day(year, month, day)

        object.__setattr__(self, "_ordinal", ymd_to_ordinal(year, month, day))

    @classmethod
    def from_ordinal(cls, ordinal: int) -> CalendarDate:
        """Create a CalendarDate from an ordinal day number.

        Ordinal 1 = 0001-01-01.

        Examples:
            >>> CalendarDate.from_ordinal(738_794)
            CalendarDate(2023, 10, 15)
        """
        year, month, day = ordinal_to_ymd(ordinal)
        return cls(year, month, day)

    @classmethod
    def from_pydate(cls, value: datetime.date) -> CalendarDate:
        """Create a CalendarDate from a standard library date.

        A datetime.datetime is accepted too; its time of day is dropped.
        """
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls) -> CalendarDate:
        """Return today's date in the local timezone."""
        return cls.from_pydate(datetime.date.today())

    @property
    def year(self) -> int:
        """Return the year component."""
        return ordinal_to_ymd(self._ordinal)[0]

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return ordinal_to_ymd(self._ordinal)[1]

    @property
    def day(self) -> int:
        """Return the day of the month."""
        return ordinal_to_ymd(self._ordinal)[2]

    @property
    def weekday(self) -> Weekday:
        """Return the day of the week, derived from the ordinal.

        Examples:
            >>> CalendarDate(2023, 10, 16).weekday
            <Weekday.MONDAY: 0>
        """
        return Weekday(ordinal_to_weekday(self._ordinal))

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self.year)

    @property
    def days_in_month(self) -> int:
        """Return the number of days in this date's month."""
        year, month, _ = ordinal_to_ymd(self._ordinal)
        return days_in_month(year, month)

    def to_tuple(self) -> tuple[int, int, int]:
        """Return the date as a (year, month, day) tuple."""
        return ordinal_to_ymd(self._ordinal)

    def to_ordinal(self) -> int:
        """Return the ordinal day number for this date."""
        return self._ordinal

    def to_pydate(self) -> datetime.date:
        """Return the equivalent standard library date.

        Raises:
            InvalidArgumentError: If the year is outside the range
                datetime.date supports (1-9999).
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        if year < datetime.MINYEAR or year > datetime.MAXYEAR:
            raise InvalidArgumentError(
                f"year must be between {datetime.MINYEAR} and {datetime.MAXYEAR} "
                f"to convert to datetime.date, got {year}",
                argument="year",
                value=year,
            )
        return datetime.date(year, month, day)

    def next_day(self) -> CalendarDate:
        """Return the following calendar day.

        Examples:
            >>> CalendarDate(2023, 12, 31).next_day()
            CalendarDate(2024, 1, 1)
        """
        return CalendarDate(*next_ymd(*self.to_tuple()))

    def add_days(self, days: int) -> CalendarDate:
        """Return a new CalendarDate offset by the given number of days.

        Examples:
            >>> CalendarDate(2024, 2, 26).add_days(3)
            CalendarDate(2024, 2, 29)
            >>> CalendarDate(2024, 1, 15).add_days(-20)
            CalendarDate(2023, 12, 26)
        """
        return CalendarDate.from_ordinal(self._ordinal + days)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> CalendarDate:
        """Return a new CalendarDate with specified components replaced.

        Raises:
            InvalidArgumentError: If the resulting date is invalid.
        """
        y, m, d = ordinal_to_ymd(self._ordinal)
        return CalendarDate(
            year if year is not None else y,
            month if month is not None else m,
            day if day is not None else d,
        )

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        Negative years get a leading minus sign (-YYYY-MM-DD).

        Examples:
            >>> CalendarDate(2024, 1, 15).to_iso_format()
            '2024-01-15'
            >>> CalendarDate(-44, 3, 15).to_iso_format()
            '-0044-03-15'
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        if year >= 0:
            return f"{year:04d}-{month:02d}-{day:02d}"
        return f"{year:05d}-{month:02d}-{day:02d}"

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[CalendarDate], tuple[int, int, int]]:
        return (type(self), self.to_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal == other._ordinal

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal < other._ordinal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal <= other._ordinal

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal > other._ordinal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal >= other._ordinal

    def __hash__(self) -> int:
        return hash(self._ordinal)

    def __repr__(self) -> str:
        year, month, day = ordinal_to_ymd(self._ordinal)
        return f"CalendarDate({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["CalendarDate"]
