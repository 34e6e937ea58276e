"""Boundary validation for quiz submissions.

Turns the permissive request schema into a typed, checked value or raises
``ValidationError`` with a message fit for the caller.
"""

from __future__ import annotations

from dataclasses import dataclass

from prephub.common.errors import ValidationError
from prephub.common.utils import normalise_email
from .models import SUBJECT_MAX_LENGTH
from .schemas import QuizSubmissionRequest

MISSING_FIELDS = "Missing required fields."


@dataclass(frozen=True)
class QuizSubmission:
    email: str
    subject: str
    score: int
    total: int


def validate_submission(payload: QuizSubmissionRequest) -> QuizSubmission:
    email = normalise_email(payload.email)
    subject = payload.subject if payload.subject and payload.subject.strip() else None
    # A total of 0 counts as missing, as does an absent score (0 is a valid score).
    if not email or subject is None or payload.score is None or not payload.total:
        raise ValidationError(MISSING_FIELDS)
    if payload.total < 0:
        raise ValidationError("Total must be a positive number.")
    if payload.score < 0:
        raise ValidationError("Score cannot be negative.")
    if payload.score > payload.total:
        raise ValidationError("Score cannot exceed total.")
    if len(subject) > SUBJECT_MAX_LENGTH:
        raise ValidationError(f"Subject must be at most {SUBJECT_MAX_LENGTH} characters.")
    return QuizSubmission(email=email, subject=subject, score=payload.score, total=payload.total)
