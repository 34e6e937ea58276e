from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RankTier(str, Enum):
    bronze = "Bronze"
    silver = "Silver"
    gold = "Gold"
    platinum = "Platinum"


@dataclass(frozen=True)
class Rank:
    name: str
    color: str
    icon: str


# Highest minimum level first.
RANKS: tuple[tuple[int, Rank], ...] = (
    (10, Rank(RankTier.platinum.value, "#8ecae6", "💠")),
    (7, Rank(RankTier.gold.value, "#f39c12", "🥇")),
    (4, Rank(RankTier.silver.value, "#95a5a6", "🥈")),
)
BASE_RANK = Rank(RankTier.bronze.value, "#cd7f32", "🥉")


def rank_for(level: int) -> Rank:
    for min_level, rank in RANKS:
        if level >= min_level:
            return rank
    return BASE_RANK
