"""Error taxonomy shared by services and the HTTP boundary.

Services raise these; ``prephub.main`` turns every one of them into a
``{"success": false, "message": ...}`` body with the matching status code.
"""

from __future__ import annotations

from typing import Optional


class PrepHubError(Exception):
    """Base class. ``message`` is safe to show to the caller."""

    status_code: int = 400
    default_message: str = "Request failed."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PrepHubError):
    status_code = 400
    default_message = "Missing required fields."


class AuthError(PrepHubError):
    status_code = 401
    default_message = "Invalid email or password."


class NotFoundError(PrepHubError):
    status_code = 404
    default_message = "User not found."


class ConflictError(PrepHubError):
    status_code = 409
    default_message = "An account with this email already exists."


class StoreError(PrepHubError):
    """Persistence failure. The message is logged, never returned."""

    status_code = 500
    default_message = "Storage failure."
    public_message = "Server error. Please try again later."
