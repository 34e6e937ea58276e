"""Shared FastAPI dependencies: store client, question bank and clock."""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from typing import Callable

from fastapi import Depends
from sqlalchemy.orm import Session

from prephub.core.config import get_settings
from prephub.db.session import get_db
from prephub.common.utils import current_timestamp
from prephub.features.questions.bank import QuestionBank
from prephub.features.users.repository import UserRepository

Clock = Callable[[], datetime]


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Per-request store client bound to the request's session."""
    return UserRepository(db, max_retries=get_settings().store_max_retries)


@lru_cache()
def get_question_bank() -> QuestionBank:
    settings = get_settings()
    return QuestionBank(settings.question_bank_path)


def get_clock() -> Clock:
    return current_timestamp
