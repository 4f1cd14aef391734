"""Journaling streak calculation.

Day boundary is UTC midnight: callers pass ``created_at.date()`` of naive UTC
timestamps together with today's UTC date.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable

DEFAULT_HORIZON_DAYS = 365


def calculate_streak(
    today: date,
    entry_dates: Iterable[date],
    horizon_days: int = DEFAULT_HORIZON_DAYS,
) -> int:
    """Count consecutive days with an entry, walking back from ``today``.

    A missing entry today does not break the streak (the day is not over);
    any other missing day ends it. At most ``horizon_days`` days are examined.
    """
    days = set(entry_dates)
    if not days:
        return 0
    streak = 0
    for offset in range(max(horizon_days, 0)):
        day = today - timedelta(days=offset)
        if day in days:
            streak += 1
        elif offset > 0:
            break
    return streak
