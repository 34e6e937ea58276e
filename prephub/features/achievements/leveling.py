"""Leveling curve. Pure functions, no side effects.

Index ``i`` of ``LEVEL_THRESHOLDS`` is the cumulative XP needed to reach
level ``i + 1``. Level 10 is terminal: XP past the top threshold keeps
accumulating but no longer changes the level.
"""

from __future__ import annotations

from dataclasses import dataclass

LEVEL_THRESHOLDS: tuple[int, ...] = (0, 200, 500, 1000, 2000, 3500, 5500, 8000, 11000, 15000)
MAX_LEVEL = len(LEVEL_THRESHOLDS)


@dataclass(frozen=True)
class LevelProgress:
    level: int
    xp_for_current: int
    xp_for_next: int

    @property
    def is_max_level(self) -> bool:
        return self.level >= MAX_LEVEL


def level_for(xp: int) -> int:
    """Highest level whose threshold is <= xp (1 for anything below 200)."""
    for index in range(MAX_LEVEL - 1, -1, -1):
        if xp >= LEVEL_THRESHOLDS[index]:
            return index + 1
    return 1


def xp_for_next(level: int) -> int:
    """Threshold of ``level + 1``; the top threshold once level 10 is reached."""
    if 0 <= level < MAX_LEVEL:
        return LEVEL_THRESHOLDS[level]
    return LEVEL_THRESHOLDS[-1]


def xp_for_current(level: int) -> int:
    """Threshold that had to be crossed to reach ``level``."""
    if 1 <= level <= MAX_LEVEL:
        return LEVEL_THRESHOLDS[level - 1]
    return 0


def level_progress(xp: int) -> LevelProgress:
    level = level_for(xp)
    return LevelProgress(level=level, xp_for_current=xp_for_current(level), xp_for_next=xp_for_next(level))
