from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.orm.exc import StaleDataError

from prephub.common.errors import ConflictError, NotFoundError, PrepHubError, StoreError
from prephub.common.utils import normalise_email
from .models import User

logger = logging.getLogger("users.repository")

T = TypeVar("T")

DEFAULT_MAX_RETRIES = 5


class UserRepository:
    """SQLAlchemy-backed store for user records and their quiz history.

    Emails are the identity key and are always compared lower-cased. Every
    write goes through ``update_atomically`` (or ``create``) so a caller
    never observes a half-applied change: the mutation and the commit either
    both happen or the session is rolled back.
    """

    def __init__(self, db: Session, max_retries: int = DEFAULT_MAX_RETRIES) -> None:
        self.db = db
        self.max_retries = max(1, max_retries)

    # --- Reads ------------------------------------------------------------

    def get_by_email(self, email: Optional[str], with_history: bool = False) -> Optional[User]:
        key = normalise_email(email)
        if not key:
            return None
        stmt = select(User).where(User.email == key)
        if with_history:
            stmt = stmt.options(selectinload(User.quiz_history))
        try:
            return self.db.scalars(stmt).one_or_none()
        except SQLAlchemyError as exc:
            raise StoreError(f"users.select_by_email failed email={key}: {exc}") from exc

    def require_by_email(self, email: Optional[str], with_history: bool = False) -> User:
        user = self.get_by_email(email, with_history=with_history)
        if user is None:
            raise NotFoundError("User not found.")
        return user

    # --- Writes -----------------------------------------------------------

    def create(self, name: str, email: str, password_hash: str) -> User:
        key = normalise_email(email)
        user = User(name=name, email=key, password_hash=password_hash, xp=0, streak=0, last_quiz_date=None)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.info("users.create_conflict email=%s", key)
            raise ConflictError("An account with this email already exists.") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(f"users.insert failed email={key}: {exc}") from exc
        self.db.refresh(user)
        logger.info("users.created id=%s email=%s", user.id, key)
        return user

    def _load_for_update(self, email: str) -> Optional[User]:
        stmt = (
            select(User)
            .where(User.email == email)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return self.db.scalars(stmt).one_or_none()

    def update_atomically(self, email: Optional[str], mutate: Callable[[User], T]) -> T:
        """Read-modify-write one user as a single transaction.

        ``mutate`` receives a freshly loaded row and may change it and add
        related rows; its return value is handed back after the commit.
        When a concurrent writer got there first the version check fails,
        the session is rolled back and ``mutate`` runs again on fresh state.
        """
        key = normalise_email(email)
        for attempt in range(1, self.max_retries + 1):
            try:
                user = self._load_for_update(key)
                if user is None:
                    raise NotFoundError("User not found.")
                result = mutate(user)
                self.db.commit()
                return result
            except StaleDataError:
                self.db.rollback()
                logger.info("users.update_conflict email=%s attempt=%d", key, attempt)
            except PrepHubError:
                self.db.rollback()
                raise
            except SQLAlchemyError as exc:
                self.db.rollback()
                raise StoreError(f"users.update failed email={key}: {exc}") from exc
        raise StoreError(f"users.update gave up after {self.max_retries} conflicts email={key}")
