from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from prephub.common.schemas import CamelModel
from prephub.common.utils import format_timestamp
from prephub.features.achievements.schemas import BadgeResponse, ProgressResponse, RankResponse
from prephub.features.users.schemas import UserIdentity


class QuizSubmissionRequest(BaseModel):
    """Raw submission body. Presence and ranges are checked in ``validation``."""
    email: Optional[str] = None
    subject: Optional[str] = None
    score: Optional[int] = None
    total: Optional[int] = None

    @field_validator("score", "total", mode="before")
    @classmethod
    def _reject_booleans(cls, value):
        # bool is an int subclass; true would otherwise count as 1
        if isinstance(value, bool):
            raise ValueError("must be an integer, not a boolean")
        return value


class QuizAttemptResponse(CamelModel):
    subject: str
    score: int
    total: int
    percentage: int
    xp_earned: int
    date: datetime

    @field_serializer("date")
    def _serialise_date(self, value: datetime) -> str:
        return format_timestamp(value)


class QuizSubmissionResponse(CamelModel):
    success: bool = True
    message: str = "Quiz result saved."
    xp_earned: int
    total_xp: int = Field(alias="totalXP")
    level: int
    streak: int
    rank: RankResponse
    badges: List[BadgeResponse] = Field(default_factory=list)
    xp_for_next: int
    xp_for_current: int


class QuizHistoryResponse(ProgressResponse):
    success: bool = True
    user: UserIdentity
    quiz_history: List[QuizAttemptResponse] = Field(default_factory=list)
