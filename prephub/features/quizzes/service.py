"""Quiz result recording.

One submission appends exactly one attempt and moves xp, streak and
last_quiz_date forward, all inside a single store transaction for that
user. Level, rank and badges are derived from the committed numbers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from prephub.common.utils import current_timestamp
from prephub.features.achievements.scoring import percentage_for, xp_for
from prephub.features.achievements.service import AchievementSummary, AchievementsService, achievements_service
from prephub.features.achievements.streaks import update_streak
from prephub.features.users.models import User
from prephub.features.users.repository import UserRepository
from .models import QuizAttempt
from .validation import QuizSubmission

logger = logging.getLogger("quizzes.service")


@dataclass(frozen=True)
class QuizOutcome:
    attempt: QuizAttempt
    xp_earned: int
    total_xp: int
    streak: int
    summary: AchievementSummary

    @property
    def level(self) -> int:
        return self.summary.level


class QuizResultRecorder:
    def __init__(
        self,
        repository: UserRepository,
        clock: Callable[[], datetime] = current_timestamp,
        achievements: AchievementsService = achievements_service,
    ) -> None:
        self.repository = repository
        self.clock = clock
        self.achievements = achievements

    def record(self, submission: QuizSubmission) -> QuizOutcome:
        percentage = percentage_for(submission.score, submission.total)
        xp_earned = xp_for(percentage)

        def apply(user: User) -> QuizOutcome:
            now = self.clock()
            new_streak = update_streak(user.last_quiz_date, user.streak, now)
            new_xp = user.xp + xp_earned
            attempt = QuizAttempt(
                subject=submission.subject,
                score=submission.score,
                total=submission.total,
                percentage=percentage,
                xp_earned=xp_earned,
                date=now,
            )
            user.quiz_history.append(attempt)
            user.xp = new_xp
            user.streak = new_streak
            user.last_quiz_date = now
            summary = self.achievements.summarize(user.quiz_history, new_xp, new_streak)
            return QuizOutcome(
                attempt=attempt,
                xp_earned=xp_earned,
                total_xp=new_xp,
                streak=new_streak,
                summary=summary,
            )

        outcome = self.repository.update_atomically(submission.email, apply)
        logger.info(
            "quiz.recorded email=%s subject=%s percentage=%d xp_earned=%d total_xp=%d level=%d streak=%d",
            submission.email,
            submission.subject,
            percentage,
            xp_earned,
            outcome.total_xp,
            outcome.level,
            outcome.streak,
        )
        return outcome
