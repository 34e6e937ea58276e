"""Question bank endpoints."""

from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from prephub.common.deps import get_question_bank
from prephub.core.config import get_settings
from .bank import QuestionBank

router = APIRouter(prefix="/api", tags=["questions"])


class SubjectsResponse(BaseModel):
    subjects: List[str]


@router.get("/questions/{subject}", response_model=List[Any])
def get_questions(subject: str, bank: QuestionBank = Depends(get_question_bank)) -> List[Any]:
    """Random sample of a subject's questions (20 by default)."""
    return bank.sample(subject, size=get_settings().quiz_sample_size)


@router.get("/subjects", response_model=SubjectsResponse)
def list_subjects(bank: QuestionBank = Depends(get_question_bank)) -> SubjectsResponse:
    return SubjectsResponse(subjects=bank.subjects())
