"""Credential hashing. The rest of the service treats hashes as opaque strings."""

from __future__ import annotations

import logging

import bcrypt

logger = logging.getLogger("auth.passwords")

# bcrypt only looks at the first 72 bytes; longer inputs are rejected up front.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = 10) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError as exc:
        logger.warning("password_verify_failed error=%s", exc)
        return False
