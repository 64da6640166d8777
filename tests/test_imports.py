"""Tests for next_matching_day package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_package() -> None:
    """Import next_matching_day package succeeds."""
    import next_matching_day

    assert next_matching_day.__version__ == "0.1.0"


def test_public_api() -> None:
    """Every name in __all__ is importable from the package."""
    import next_matching_day

    for name in next_matching_day.__all__:
        assert hasattr(next_matching_day, name), name


def test_import_subpackages() -> None:
    from next_matching_day import _internal, core, match, units

    for module in (_internal, core, match, units):
        assert hasattr(module, "__all__")


def test_import_errors() -> None:
    """Import next_matching_day.errors succeeds with all exception classes."""
    from next_matching_day.errors import InvalidArgumentError, MatchingError

    assert issubclass(InvalidArgumentError, MatchingError)
    assert issubclass(MatchingError, Exception)


def test_import_constants() -> None:
    from next_matching_day._internal.constants import (
        DAYS_IN_MONTH,
        DAYS_PER_WEEK,
        MAX_DAY_OF_MONTH,
        MAX_LEAP_YEAR_GAP,
    )

    assert len(DAYS_IN_MONTH) == 13  # 0-indexed placeholder + 12 months
    assert max(DAYS_IN_MONTH) == MAX_DAY_OF_MONTH
    assert DAYS_PER_WEEK == 7
    assert MAX_LEAP_YEAR_GAP == 8


def test_matchers_share_identity() -> None:
    """Top-level names are the same objects as the submodule ones."""
    import next_matching_day
    from next_matching_day.match.annual import find_next_annual_date
    from next_matching_day.match.day_of_month import find_next_day_of_month
    from next_matching_day.match.weekday import find_next_weekday

    assert next_matching_day.find_next_annual_date is find_next_annual_date
    assert next_matching_day.find_next_day_of_month is find_next_day_of_month
    assert next_matching_day.find_next_weekday is find_next_weekday
