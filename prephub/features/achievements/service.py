from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List

from .badges import AttemptLike, Badge, badges_for
from .leveling import LevelProgress, level_progress
from .ranks import Rank, rank_for

logger = logging.getLogger("achievements.service")


@dataclass(frozen=True)
class AchievementSummary:
    xp: int
    streak: int
    progress: LevelProgress
    rank: Rank
    badges: List[Badge]

    @property
    def level(self) -> int:
        return self.progress.level

    def as_fields(self) -> Dict[str, Any]:
        """Flatten into the keyword set of ``ProgressResponse``."""
        return {
            "xp": self.xp,
            "level": self.progress.level,
            "streak": self.streak,
            "rank": asdict(self.rank),
            "badges": [asdict(b) for b in self.badges],
            "xp_for_next": self.progress.xp_for_next,
            "xp_for_current": self.progress.xp_for_current,
        }


class AchievementsService:
    """Derives level, rank and badges. Nothing here is persisted."""

    def summarize(self, history: Iterable[AttemptLike], xp: int, streak: int) -> AchievementSummary:
        progress = level_progress(xp)
        summary = AchievementSummary(
            xp=xp,
            streak=streak,
            progress=progress,
            rank=rank_for(progress.level),
            badges=badges_for(history, xp, streak),
        )
        logger.debug(
            "achievements.summary xp=%d level=%d streak=%d badges=%d",
            xp,
            summary.level,
            streak,
            len(summary.badges),
        )
        return summary


achievements_service = AchievementsService()
