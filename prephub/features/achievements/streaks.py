"""
Daily streak tracking. Pure functions, no DB access.

Days are counted on elapsed time, not on calendar dates: a quiz at 23:00
followed by one at 01:00 the next morning is still "the same day", and a
full 24 hours has to pass before the streak can grow.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from prephub.common.utils import as_utc

ONE_DAY = timedelta(days=1)


def elapsed_days(last_quiz_date: datetime, now: datetime) -> int:
    """Whole days between the two instants, floored (negative on clock skew)."""
    return (as_utc(now) - as_utc(last_quiz_date)) // ONE_DAY


def update_streak(last_quiz_date: Optional[datetime], current_streak: int, now: datetime) -> int:
    if last_quiz_date is None:
        return 1
    diff_days = elapsed_days(last_quiz_date, now)
    # Order matters: a negative gap falls through to the reset.
    if diff_days == 0:
        return current_streak
    if diff_days == 1:
        return current_streak + 1
    return 1
