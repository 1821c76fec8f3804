"""Comment creation and comment-tree lookups."""
from __future__ import annotations

import logging
import uuid

from threadboard.core.errors import NotFoundError, PermissionDeniedError, ValidationError
from threadboard.models.comment import COMMENT_MAX_LENGTH
from threadboard.repositories.base import Storage
from threadboard.schemas import CommentRecord

__all__ = ["CommentService"]

logger = logging.getLogger(__name__)


class CommentService:
    """Usecases around comments and replies."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def create_comment(self, text: str, item_id: str, author_id: str) -> CommentRecord:
        """Attach a comment to a post or to another comment.

        ``item_id`` may name either. A post id produces a top-level comment,
        which the post author may have disabled. A comment id produces a reply
        that inherits the parent's post id.

        Raises:
            ValidationError: If the text is blank or too long.
            PermissionDeniedError: If the target post does not accept comments.
            NotFoundError: If ``item_id`` matches neither a post nor a comment,
                or the author no longer exists.
        """
        if not text or not text.strip():
            raise ValidationError("comment must not be empty")
        if len(text) > COMMENT_MAX_LENGTH:
            raise ValidationError(
                f"comment must be between 1 and {COMMENT_MAX_LENGTH} characters"
            )
        self.storage.get_user_by_id(author_id)

        post_id, parent_comment_id = self._resolve_item(item_id)
        comment = self.storage.create_comment(
            str(uuid.uuid4()),
            text,
            author_id,
            post_id,
            parent_comment_id,
        )
        logger.info(
            "User %s commented %s on post %s (parent=%s)",
            author_id,
            comment.id,
            post_id,
            parent_comment_id,
        )
        return comment

    def _resolve_item(self, item_id: str) -> tuple[str, str | None]:
        """Return ``(post_id, parent_comment_id)`` for a new comment on ``item_id``."""
        try:
            post = self.storage.get_post_by_id(item_id)
        except NotFoundError:
            pass
        else:
            if not post.commentable:
                raise PermissionDeniedError("author turned off comments under this post")
            return post.id, None

        try:
            parent = self.storage.get_comment_by_id(item_id)
        except NotFoundError as err:
            raise NotFoundError("item not found") from err
        return parent.post_id, parent.id

    def get_comment(self, comment_id: str) -> CommentRecord:
        return self.storage.get_comment_by_id(comment_id)

    def list_comments(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]:
        return self.storage.get_all_comments(limit, offset)

    def list_comments_by_post(
        self, post_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]:
        """Return the top-level comments of a post."""
        return self.storage.get_comments_by_post_id(post_id, limit, offset)

    def list_replies(
        self, comment_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]:
        """Return direct replies to a comment."""
        return self.storage.get_comments_by_parent_id(comment_id, limit, offset)

    def list_comments_by_user(
        self, user_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]:
        return self.storage.get_comments_by_user_id(user_id, limit, offset)
