"""
Calendar date window helpers.
"""

from __future__ import annotations

import calendar
from datetime import datetime, time
from typing import Tuple


def month_window(year: int, month: int) -> Tuple[datetime, datetime]:
    """
    Return the closed interval covering a calendar month.

    The window runs from the first day at midnight to the last day at
    23:59:59.999999.

    Args:
        year: Four-digit year (1-9999)
        month: Month number (1-12)

    Returns:
        ``(start, end)`` naive datetimes

    Raises:
        ValueError: If the year or month is out of range
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")
    if not 1 <= year <= 9999:
        raise ValueError(f"Invalid year: {year}")
    last_day = calendar.monthrange(year, month)[1]
    start = datetime(year, month, 1)
    end = datetime.combine(datetime(year, month, last_day).date(), time.max)
    return start, end
