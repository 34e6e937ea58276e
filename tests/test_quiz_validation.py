import pytest
from pydantic import ValidationError as PydanticValidationError

from prephub.common.errors import ValidationError
from prephub.features.quizzes.models import SUBJECT_MAX_LENGTH
from prephub.features.quizzes.schemas import QuizSubmissionRequest
from prephub.features.quizzes.validation import MISSING_FIELDS, validate_submission


def submit(**overrides):
    body = {"email": "aarav@upsc.com", "subject": "Geography", "score": 16, "total": 20}
    body.update(overrides)
    return validate_submission(QuizSubmissionRequest(**body))


def test_valid_submission():
    submission = submit(email="  Aarav@UPSC.com ")
    assert submission.email == "aarav@upsc.com"
    assert submission.subject == "Geography"
    assert (submission.score, submission.total) == (16, 20)


def test_zero_score_is_allowed():
    assert submit(score=0).score == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"email": None},
        {"email": "   "},
        {"subject": None},
        {"subject": ""},
        {"subject": "  "},
        {"score": None},
        {"total": None},
        {"total": 0},
    ],
)
def test_missing_fields(overrides):
    with pytest.raises(ValidationError) as exc:
        submit(**overrides)
    assert exc.value.message == MISSING_FIELDS
    assert exc.value.status_code == 400


def test_negative_total():
    with pytest.raises(ValidationError, match="Total must be a positive number."):
        submit(total=-5)


def test_negative_score():
    with pytest.raises(ValidationError, match="Score cannot be negative."):
        submit(score=-1)


def test_score_above_total():
    with pytest.raises(ValidationError, match="Score cannot exceed total."):
        submit(score=21, total=20)


def test_subject_longer_than_column():
    with pytest.raises(ValidationError, match="Subject must be at most 64 characters."):
        submit(subject="x" * (SUBJECT_MAX_LENGTH + 1))


@pytest.mark.parametrize("field", ["score", "total"])
def test_booleans_are_not_integers(field):
    with pytest.raises(PydanticValidationError):
        QuizSubmissionRequest(**{field: True})
