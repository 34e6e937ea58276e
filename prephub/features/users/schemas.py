"""Pydantic models for user resources."""

from __future__ import annotations

from prephub.common.schemas import CamelModel


class UserIdentity(CamelModel):
    """Public identity of a user; the credential hash never leaves the store."""
    name: str
    email: str
