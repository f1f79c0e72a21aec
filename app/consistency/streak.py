"""
Check-in streak.

The streak is the number of consecutive calendar days, ending today,
that have a check-in.  A missing check-in today means a streak of 0,
even if yesterday was logged.
"""

import datetime
from typing import Iterable


def compute_streak(dates: Iterable[datetime.date], today: datetime.date) -> int:
    """Count consecutive logged days walking backward from *today*.

    Duplicate dates and dates after *today* have no effect.
    """
    logged = set(dates)
    streak = 0
    day = today
    while day in logged:
        streak += 1
        day -= datetime.timedelta(days=1)
    return streak
