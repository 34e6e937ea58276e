from __future__ import annotations

from typing import List

from pydantic import Field

from prephub.common.schemas import CamelModel


class BadgeResponse(CamelModel):
    id: str
    icon: str
    name: str
    description: str


class RankResponse(CamelModel):
    name: str
    color: str
    icon: str


class ProgressResponse(CamelModel):
    """Fields every progress-bearing response shares."""
    xp: int
    level: int
    streak: int
    rank: RankResponse
    badges: List[BadgeResponse] = Field(default_factory=list)
    xp_for_next: int
    xp_for_current: int
