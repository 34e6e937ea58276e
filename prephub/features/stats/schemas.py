from __future__ import annotations

from typing import Dict, List

from pydantic import Field

from prephub.common.schemas import CamelModel
from prephub.features.achievements.schemas import ProgressResponse
from prephub.features.quizzes.schemas import QuizAttemptResponse
from prephub.features.users.schemas import UserIdentity
from .aggregator import Trend


class SubjectStatsResponse(CamelModel):
    attempts: int
    best: int
    latest: int
    trend: Trend


class StatsResponse(ProgressResponse):
    success: bool = True
    user: UserIdentity
    subject_stats: Dict[str, SubjectStatsResponse]
    recent_history: List[QuizAttemptResponse] = Field(default_factory=list)
    total_quizzes: int
