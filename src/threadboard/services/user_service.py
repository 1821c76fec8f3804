"""Registration, login and user lookups."""
from __future__ import annotations

import logging

from threadboard.core import security
from threadboard.core.errors import (
    AlreadyExistsError,
    AuthenticationError,
    NotFoundError,
    ValidationError,
)
from threadboard.models.user import USERNAME_MAX_LENGTH
from threadboard.repositories.base import Storage
from threadboard.schemas import CommentRecord, PostRecord, UserRecord

__all__ = ["UserService"]

logger = logging.getLogger(__name__)


class UserService:
    """Usecases around user accounts."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def register(self, username: str, password: str) -> UserRecord:
        """Create a new account with a bcrypt-hashed password.

        Raises:
            ValidationError: If the username or password is empty, the
                username is longer than the column allows, or the password
                is longer than bcrypt accepts.
            AlreadyExistsError: If the username is taken.
        """
        if not username or len(username) > USERNAME_MAX_LENGTH:
            raise ValidationError(
                f"username must be between 1 and {USERNAME_MAX_LENGTH} characters"
            )
        if not password:
            raise ValidationError("password must not be empty")
        if len(password.encode("utf-8")) > security.PASSWORD_MAX_BYTES:
            raise ValidationError(
                f"password must be at most {security.PASSWORD_MAX_BYTES} bytes"
            )

        try:
            self.storage.get_user_by_username(username)
        except NotFoundError:
            pass
        else:
            raise AlreadyExistsError("user already exists")

        user = self.storage.create_user(username, security.hash_password(password))
        logger.info("Registered user %s", user.id)
        return user

    def login(self, username: str, password: str) -> str:
        """Check credentials and return a fresh access token."""
        try:
            user = self.storage.get_user_by_username(username)
        except NotFoundError as err:
            logger.info("Login failed for unknown username")
            raise AuthenticationError("invalid username or password") from err

        if not security.verify_password(password, user.password_hash):
            logger.info("Login failed for user %s", user.id)
            raise AuthenticationError("invalid username or password")

        return security.create_access_token(user.id)

    def get_user_by_id(self, user_id: str) -> UserRecord:
        return self.storage.get_user_by_id(user_id)

    def get_user_by_username(self, username: str) -> UserRecord:
        return self.storage.get_user_by_username(username)

    def list_users(self, limit: int | None = None, offset: int | None = None) -> list[UserRecord]:
        return self.storage.get_all_users(limit, offset)

    def list_posts(
        self, user_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[PostRecord]:
        return self.storage.get_posts_by_user_id(user_id, limit, offset)

    def list_comments(
        self, user_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]:
        return self.storage.get_comments_by_user_id(user_id, limit, offset)
