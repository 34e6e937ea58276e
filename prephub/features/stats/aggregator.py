"""Per-subject statistics over a quiz history.

Histories are kept in insertion order, which is not always date order
(seeded attempts are backdated), so everything here sorts explicitly.
Python's sort is stable: attempts sharing a timestamp keep insertion order.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, Iterable, List, Protocol, Sequence, TypeVar

from prephub.common.utils import as_utc

TRACKED_SUBJECTS: tuple[str, ...] = ("Geography", "History", "Polity", "Economics", "Science")
RECENT_LIMIT = 10


class DatedAttempt(Protocol):
    subject: str
    percentage: int
    date: datetime


A = TypeVar("A", bound=DatedAttempt)


class Trend(str, Enum):
    up = "up"
    down = "down"
    same = "same"
    none = "none"


@dataclass(frozen=True)
class SubjectStats:
    attempts: int
    best: int
    latest: int
    trend: Trend


EMPTY_STATS = SubjectStats(attempts=0, best=0, latest=0, trend=Trend.none)


def _date_key(attempt: DatedAttempt) -> datetime:
    return as_utc(attempt.date)


def trend_between(previous: int, latest: int) -> Trend:
    if latest > previous:
        return Trend.up
    if latest < previous:
        return Trend.down
    return Trend.same


def stats_for_subject(history: Iterable[DatedAttempt], subject: str) -> SubjectStats:
    attempts = [a for a in history if a.subject == subject]
    if not attempts:
        return EMPTY_STATS
    ordered = sorted(attempts, key=_date_key)
    latest = ordered[-1].percentage
    previous = ordered[-2].percentage if len(ordered) > 1 else latest
    return SubjectStats(
        attempts=len(attempts),
        best=max(a.percentage for a in attempts),
        latest=latest,
        trend=trend_between(previous, latest),
    )


def subject_stats(
    history: Iterable[DatedAttempt],
    subjects: Sequence[str] = TRACKED_SUBJECTS,
) -> Dict[str, SubjectStats]:
    attempts = list(history)
    return {subject: stats_for_subject(attempts, subject) for subject in subjects}


def recent_history(history: Iterable[A], limit: int = RECENT_LIMIT) -> List[A]:
    """Newest first across all subjects."""
    return sorted(history, key=_date_key, reverse=True)[:limit]
