from __future__ import annotations

import logging
from dataclasses import dataclass

from prephub.common.errors import AuthError, ConflictError, ValidationError
from prephub.common.utils import normalise_email
from prephub.core.config import get_settings
from prephub.features.achievements.service import achievements_service
from prephub.features.quizzes.schemas import QuizAttemptResponse
from prephub.features.users.models import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH, User
from prephub.features.users.repository import UserRepository
from .passwords import MAX_PASSWORD_BYTES, hash_password, verify_password
from .schemas import LoginRequest, ProfileOut, RegisterRequest

logger = logging.getLogger("auth.service")

INVALID_CREDENTIALS = "Invalid email or password."


@dataclass(frozen=True)
class Registration:
    name: str
    email: str
    password: str


@dataclass(frozen=True)
class Credentials:
    email: str
    password: str


def validate_registration(payload: RegisterRequest) -> Registration:
    name = (payload.name or "").strip()
    email = normalise_email(payload.email)
    if not name or not email or not payload.password:
        raise ValidationError("All fields are required.")
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(f"Name must be at most {NAME_MAX_LENGTH} characters.")
    if len(email) > EMAIL_MAX_LENGTH:
        raise ValidationError(f"Email must be at most {EMAIL_MAX_LENGTH} characters.")
    if len(payload.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must not exceed {MAX_PASSWORD_BYTES} bytes.")
    return Registration(name=name, email=email, password=payload.password)


def validate_login(payload: LoginRequest) -> Credentials:
    email = normalise_email(payload.email)
    if not email or not payload.password:
        raise ValidationError("Email and password are required.")
    return Credentials(email=email, password=payload.password)


def build_profile(user: User) -> ProfileOut:
    history = list(user.quiz_history)
    summary = achievements_service.summarize(history, user.xp, user.streak)
    return ProfileOut(
        name=user.name,
        email=user.email,
        quiz_history=[QuizAttemptResponse.model_validate(a) for a in history],
        **summary.as_fields(),
    )


class AuthService:
    def __init__(self, repository: UserRepository, rounds: int | None = None) -> None:
        self.repository = repository
        self.rounds = rounds if rounds is not None else get_settings().bcrypt_rounds

    def register(self, registration: Registration) -> User:
        if self.repository.get_by_email(registration.email) is not None:
            raise ConflictError("An account with this email already exists.")
        password_hash = hash_password(registration.password, rounds=self.rounds)
        user = self.repository.create(registration.name, registration.email, password_hash)
        logger.info("auth.registered user_id=%s email=%s", user.id, user.email)
        return user

    def login(self, credentials: Credentials) -> User:
        user = self.repository.get_by_email(credentials.email, with_history=True)
        if user is None or not verify_password(credentials.password, user.password_hash):
            logger.info("auth.login_rejected email=%s", credentials.email)
            raise AuthError(INVALID_CREDENTIALS)
        logger.info("auth.login user_id=%s email=%s", user.id, user.email)
        return user
