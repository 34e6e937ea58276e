from dataclasses import dataclass

from prephub.features.achievements.badges import BADGE_RULES, badges_for
from prephub.features.achievements.ranks import rank_for
from prephub.features.achievements.service import achievements_service


@dataclass
class Attempt:
    subject: str
    percentage: int


def ids(badges):
    return [b.id for b in badges]


def test_no_history_no_badges():
    assert badges_for([], 0, 0) == []


def test_first_quiz_and_scholar():
    assert ids(badges_for([Attempt("Geography", 80)], 100, 1)) == ["first", "scholar"]


def test_badges_follow_table_order():
    history = [Attempt(s, 100) for s in ("Geography", "History", "Polity", "Economics", "Science")] * 4
    unlocked = ids(badges_for(history, 1000, 7))
    assert unlocked == [rule.badge.id for rule in BADGE_RULES]


def test_quiz_count_badges():
    history = [Attempt("History", 50)] * 5
    assert ids(badges_for(history, 200, 0)) == ["first", "quizzer"]
    history = [Attempt("History", 50)] * 20
    assert ids(badges_for(history, 800, 0)) == ["first", "quizzer", "dedicated"]


def test_perfect_needs_exactly_100():
    assert "perfect" not in ids(badges_for([Attempt("Science", 99)], 100, 1))
    assert "perfect" in ids(badges_for([Attempt("Science", 100)], 100, 1))


def test_subjects_are_case_sensitive():
    history = [Attempt("science", 50), Attempt("Science", 50), Attempt("SCIENCE", 50)]
    assert "explorer" in ids(badges_for(history, 60, 1))
    history = [Attempt("Science", 50)] * 3
    assert "explorer" not in ids(badges_for(history, 60, 1))


def test_streak_and_xp_badges():
    history = [Attempt("Polity", 30)]
    assert ids(badges_for(history, 999, 3)) == ["first", "streak3"]
    assert ids(badges_for(history, 1000, 7)) == ["first", "streak3", "streak7", "xp1k"]


def test_badges_are_idempotent():
    history = [Attempt("Geography", 90), Attempt("History", 40)]
    assert badges_for(history, 140, 2) == badges_for(history, 140, 2)


def test_badge_icons_and_names():
    first = badges_for([Attempt("Geography", 10)], 20, 1)[0]
    assert (first.icon, first.name, first.description) == ("🎯", "First Quiz", "Completed your first quiz")


def test_ranks():
    assert rank_for(1).name == "Bronze"
    assert rank_for(3).name == "Bronze"
    assert rank_for(4).name == "Silver"
    assert rank_for(6).name == "Silver"
    assert rank_for(7).name == "Gold"
    assert rank_for(9).name == "Gold"
    assert rank_for(10).name == "Platinum"
    assert rank_for(10).color == "#8ecae6"


def test_summary_fields():
    summary = achievements_service.summarize([Attempt("Geography", 80)], 100, 1)
    fields = summary.as_fields()
    assert fields["level"] == 1
    assert fields["xp_for_next"] == 200
    assert fields["xp_for_current"] == 0
    assert fields["rank"] == {"name": "Bronze", "color": "#cd7f32", "icon": "🥉"}
    assert [b["id"] for b in fields["badges"]] == ["first", "scholar"]
