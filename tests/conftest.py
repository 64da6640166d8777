"""Pytest configuration and fixtures for next_matching_day tests."""

from __future__ import annotations

import datetime
import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so next_matching_day can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def reference_days() -> list[datetime.date]:
    """Every day from 2023-12-01 through 2025-03-31.

    The span covers a year boundary, a leap February and a common
    February.
    """
    start = datetime.date(2023, 12, 1)
    end = datetime.date(2025, 3, 31)
    return [
        start + datetime.timedelta(days=n)
        for n in range((end - start).days + 1)
    ]
