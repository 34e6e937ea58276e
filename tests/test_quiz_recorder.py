import pytest

from prephub.common.errors import NotFoundError
from prephub.features.quizzes.service import QuizResultRecorder
from prephub.features.quizzes.validation import QuizSubmission
from prephub.features.users.models import User
from prephub.features.users.repository import UserRepository


def submission(score=16, total=20, subject="Geography", email="aarav@upsc.com"):
    return QuizSubmission(email=email, subject=subject, score=score, total=total)


@pytest.fixture
def user(repository):
    return repository.create("Aarav Sharma", "aarav@upsc.com", "hash")


def test_first_submission(repository, clock, user):
    outcome = QuizResultRecorder(repository, clock=clock).record(submission())

    assert outcome.attempt.percentage == 80
    assert outcome.xp_earned == 100
    assert outcome.total_xp == 100
    assert outcome.level == 1
    assert outcome.streak == 1
    assert outcome.summary.rank.name == "Bronze"
    assert [b.id for b in outcome.summary.badges] == ["first", "scholar"]

    stored = repository.require_by_email("aarav@upsc.com", with_history=True)
    assert stored.xp == 100
    assert stored.streak == 1
    assert len(stored.quiz_history) == 1
    assert stored.quiz_history[0].xp_earned == 100


def test_streak_follows_clock(repository, clock, user):
    recorder = QuizResultRecorder(repository, clock=clock)
    recorder.record(submission())
    clock.advance(hours=3)
    assert recorder.record(submission()).streak == 1
    clock.advance(days=1)
    assert recorder.record(submission()).streak == 2
    clock.advance(days=3)
    assert recorder.record(submission()).streak == 1


def test_xp_accumulates_and_levels_up(repository, clock, user):
    recorder = QuizResultRecorder(repository, clock=clock)
    recorder.record(submission(score=20))
    outcome = recorder.record(submission(score=20))
    assert outcome.total_xp == 200
    assert outcome.level == 2
    assert outcome.summary.progress.xp_for_next == 500
    assert "perfect" in [b.id for b in outcome.summary.badges]


def test_history_is_append_only(repository, clock, user):
    recorder = QuizResultRecorder(repository, clock=clock)
    first = recorder.record(submission(score=4, subject="History"))
    recorder.record(submission(score=12, subject="Polity"))
    stored = repository.require_by_email("aarav@upsc.com", with_history=True)
    assert [a.subject for a in stored.quiz_history] == ["History", "Polity"]
    assert stored.quiz_history[0].percentage == first.attempt.percentage == 20
    assert stored.xp == sum(a.xp_earned for a in stored.quiz_history)


def test_unknown_user(repository, clock):
    with pytest.raises(NotFoundError):
        QuizResultRecorder(repository, clock=clock).record(submission(email="ghost@upsc.com"))


class InterleavingRepository(UserRepository):
    """Lets a competing writer commit between our read and our write."""

    def __init__(self, db, competitor, max_retries=3):
        super().__init__(db, max_retries=max_retries)
        self.competitor = competitor
        self.loads = 0

    def _load_for_update(self, email):
        user = super()._load_for_update(email)
        self.loads += 1
        if self.loads == 1:
            self.competitor()
        return user


def test_concurrent_submissions_are_not_lost(db, session_factory, clock, user):
    def competitor():
        with session_factory() as other:
            QuizResultRecorder(UserRepository(other), clock=clock).record(submission(subject="History"))

    repository = InterleavingRepository(db, competitor)
    outcome = QuizResultRecorder(repository, clock=clock).record(submission(subject="Polity"))

    # The first write hit a stale version and was retried on fresh state
    assert repository.loads == 2
    assert outcome.total_xp == 200

    with session_factory() as fresh:
        stored = fresh.query(User).filter_by(email="aarav@upsc.com").one()
        assert stored.xp == 200
        assert sorted(a.subject for a in stored.quiz_history) == ["History", "Polity"]
        assert stored.xp == sum(a.xp_earned for a in stored.quiz_history)
