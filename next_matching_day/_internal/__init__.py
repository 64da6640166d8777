"""Internal utilities for next_matching_day.

This module contains private implementation details:
    - Calendar arithmetic (leap years, month lengths, ordinals)
    - Validation decorator and helpers
    - Constants and search horizons

Note: This module is not part of the public API.
"""

from __future__ import annotations

from next_matching_day._internal.validation import (
    validate_day,
    validate_month,
    validate_month_day,
    validate_range,
)

__all__: list[str] = [
    "validate_day",
    "validate_month",
    "validate_month_day",
    "validate_range",
]
