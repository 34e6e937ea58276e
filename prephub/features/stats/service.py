"""Read-side views over a user's record: dashboard stats and full history."""

from __future__ import annotations

from dataclasses import asdict

from prephub.features.achievements.service import achievements_service
from prephub.features.quizzes.schemas import QuizAttemptResponse, QuizHistoryResponse
from prephub.features.users.models import User
from prephub.features.users.repository import UserRepository
from prephub.features.users.schemas import UserIdentity
from .aggregator import recent_history, subject_stats
from .schemas import StatsResponse, SubjectStatsResponse


def _identity(user: User) -> UserIdentity:
    return UserIdentity(name=user.name, email=user.email)


def _attempts(attempts) -> list[QuizAttemptResponse]:
    return [QuizAttemptResponse.model_validate(a) for a in attempts]


class StatsService:
    def build_stats(self, user: User) -> StatsResponse:
        history = list(user.quiz_history)
        summary = achievements_service.summarize(history, user.xp, user.streak)
        return StatsResponse(
            user=_identity(user),
            subject_stats={
                subject: SubjectStatsResponse(**asdict(stats))
                for subject, stats in subject_stats(history).items()
            },
            recent_history=_attempts(recent_history(history)),
            total_quizzes=len(history),
            **summary.as_fields(),
        )

    def build_history(self, user: User) -> QuizHistoryResponse:
        history = list(user.quiz_history)
        summary = achievements_service.summarize(history, user.xp, user.streak)
        return QuizHistoryResponse(
            user=_identity(user),
            quiz_history=_attempts(history),
            **summary.as_fields(),
        )

    def get_stats(self, repository: UserRepository, email: str) -> StatsResponse:
        return self.build_stats(repository.require_by_email(email, with_history=True))

    def get_history(self, repository: UserRepository, email: str) -> QuizHistoryResponse:
        return self.build_history(repository.require_by_email(email, with_history=True))


stats_service = StatsService()
