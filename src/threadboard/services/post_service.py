"""Service-level helpers for creating and listing posts."""
from __future__ import annotations

import logging
import uuid

from threadboard.core.errors import ValidationError
from threadboard.repositories.base import Storage
from threadboard.schemas import PostRecord

__all__ = ["PostService"]

logger = logging.getLogger(__name__)


class PostService:
    """Usecases around posts."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def create_post(self, text: str, author_id: str, commentable: bool = True) -> PostRecord:
        """Create a post on behalf of ``author_id``.

        Args:
            text: Post body; must contain something other than whitespace.
            author_id: Id of the authenticated author.
            commentable: Whether other users may comment on the post.

        Raises:
            ValidationError: If the text is blank.
            NotFoundError: If the author no longer exists.
        """
        if not text or not text.strip():
            raise ValidationError("post text must not be empty")
        # Tokens outlive in-memory storage; make sure the author is still there.
        self.storage.get_user_by_id(author_id)

        post = self.storage.create_post(str(uuid.uuid4()), text, author_id, commentable)
        logger.info("User %s created post %s (commentable=%s)", author_id, post.id, commentable)
        return post

    def get_post(self, post_id: str) -> PostRecord:
        return self.storage.get_post_by_id(post_id)

    def list_posts(self, limit: int | None = None, offset: int | None = None) -> list[PostRecord]:
        return self.storage.get_all_posts(limit, offset)

    def list_posts_by_user(
        self, user_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[PostRecord]:
        return self.storage.get_posts_by_user_id(user_id, limit, offset)
