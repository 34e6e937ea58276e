"""Badge rules.

Badges are never stored: they are recomputed from the quiz history and the
current xp/streak on every read, so they cannot drift from the data that
earned them. Rules are evaluated independently and returned in table order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Protocol, Sequence


class AttemptLike(Protocol):
    subject: str
    percentage: int


@dataclass(frozen=True)
class Badge:
    id: str
    icon: str
    name: str
    description: str


@dataclass(frozen=True)
class BadgeContext:
    total_quizzes: int
    distinct_subjects: int
    has_excellent: bool
    has_perfect: bool
    xp: int
    streak: int

    @classmethod
    def build(cls, history: Iterable[AttemptLike], xp: int, streak: int) -> "BadgeContext":
        attempts = list(history)
        return cls(
            total_quizzes=len(attempts),
            distinct_subjects=len({a.subject for a in attempts}),
            has_excellent=any(a.percentage >= 80 for a in attempts),
            has_perfect=any(a.percentage == 100 for a in attempts),
            xp=xp,
            streak=streak,
        )


@dataclass(frozen=True)
class BadgeRule:
    badge: Badge
    unlocked: Callable[[BadgeContext], bool]


BADGE_RULES: Sequence[BadgeRule] = (
    BadgeRule(Badge("first", "🎯", "First Quiz", "Completed your first quiz"), lambda c: c.total_quizzes >= 1),
    BadgeRule(Badge("quizzer", "📝", "Quizzer", "5 quizzes completed"), lambda c: c.total_quizzes >= 5),
    BadgeRule(Badge("dedicated", "💪", "Dedicated", "20 quizzes completed"), lambda c: c.total_quizzes >= 20),
    BadgeRule(Badge("scholar", "🏆", "Scholar", "Scored 80%+ in a quiz"), lambda c: c.has_excellent),
    BadgeRule(Badge("perfect", "⭐", "Perfect Score", "Scored 100% in a quiz"), lambda c: c.has_perfect),
    BadgeRule(Badge("explorer", "🌍", "Explorer", "Tried 3+ subjects"), lambda c: c.distinct_subjects >= 3),
    BadgeRule(Badge("allrounder", "🎓", "All-Rounder", "Tried all 5 subjects"), lambda c: c.distinct_subjects >= 5),
    BadgeRule(Badge("streak3", "🔥", "On Fire", "3-day streak"), lambda c: c.streak >= 3),
    BadgeRule(Badge("streak7", "⚡", "Lightning", "7-day streak"), lambda c: c.streak >= 7),
    BadgeRule(Badge("xp1k", "💎", "Diamond Mind", "1000+ XP earned"), lambda c: c.xp >= 1000),
)


def badges_for(history: Iterable[AttemptLike], xp: int, streak: int) -> List[Badge]:
    context = BadgeContext.build(history, xp, streak)
    return [rule.badge for rule in BADGE_RULES if rule.unlocked(context)]
