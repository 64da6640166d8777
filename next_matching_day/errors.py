"""next_matching_day exception hierarchy.

All package-specific exceptions inherit from MatchingError.
"""

from __future__ import annotations

from typing import Any


class MatchingError(Exception):
    """Base exception for all next_matching_day errors."""

    pass


class InvalidArgumentError(MatchingError):
    """Invalid input value.

    Raised before any date search starts when an argument violates its
    constraint. The offending parameter name and value are kept on the
    exception.

    Examples:
        - Day-of-month target outside 1-31
        - Month value outside 1-12
        - Day value outside the valid range for its month
        - February 29 target with no valid next occurrence
    """

    def __init__(self, message: str, *, argument: str | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.argument = argument
        self.value = value


__all__ = [
    "MatchingError",
    "InvalidArgumentError",
]
