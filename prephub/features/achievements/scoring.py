"""
Quiz scoring: percentage rounding and the banded XP award.

XP bands (percentage is already rounded):
	- 80 and above : 100 XP
	- 60 .. 79     : 70 XP
	- 40 .. 59     : 40 XP
	- below 40     : 20 XP

Every submitted quiz earns something; XP is never subtracted.
"""

from __future__ import annotations

import math

XP_BANDS: tuple[tuple[int, int], ...] = (
    (80, 100),
    (60, 70),
    (40, 40),
)
XP_FLOOR = 20


def percentage_for(score: int, total: int) -> int:
    """Rounded percentage, halves rounded up (82.5 -> 83)."""
    if total <= 0:
        raise ValueError("total must be positive")
    return int(math.floor(score / total * 100 + 0.5))


def xp_for(percentage: int) -> int:
    for minimum, award in XP_BANDS:
        if percentage >= minimum:
            return award
    return XP_FLOOR
