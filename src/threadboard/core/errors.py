"""Application exception hierarchy.

Services and storage backends raise these; the GraphQL layer reports their
message to the client and masks everything else.

    ThreadboardError
    ├── NotFoundError
    ├── AlreadyExistsError
    ├── ValidationError
    ├── AuthenticationError
    └── PermissionDeniedError
"""

from __future__ import annotations

from typing import Any


class ThreadboardError(Exception):
    """Base class for errors that are safe to show to API clients.

    Attributes:
        message: Client-facing description.
        context: Extra details for logs only.
    """

    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None, context: dict[str, Any] | None = None) -> None:
        self.message = message or self.default_message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(ThreadboardError):
    """Requested user, post, comment or item does not exist."""

    default_message = "not found"


class AlreadyExistsError(ThreadboardError):
    """A uniqueness constraint would be violated."""

    default_message = "already exists"


class ValidationError(ThreadboardError):
    """Input failed validation (length limits, negative pagination, ...)."""

    default_message = "invalid input"


class AuthenticationError(ThreadboardError):
    """Missing or wrong credentials."""

    default_message = "unauthorized"


class PermissionDeniedError(ThreadboardError):
    """The caller is authenticated but the action is not allowed."""

    default_message = "permission denied"
