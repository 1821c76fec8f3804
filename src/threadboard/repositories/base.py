"""Storage interface shared by the SQL and in-memory backends."""
from __future__ import annotations

from typing import Protocol

from threadboard.schemas import CommentRecord, PostRecord, UserRecord

__all__ = ["Storage"]


class Storage(Protocol):
    """Persistence operations used by the service layer.

    Lookups by id or username raise ``NotFoundError`` when nothing matches.
    List operations return records oldest first and accept optional
    ``limit``/``offset`` arguments (see ``threadboard.repositories.pagination``).
    """

    # Users
    def get_user_by_username(self, username: str) -> UserRecord: ...

    def create_user(self, username: str, password_hash: str) -> UserRecord: ...

    def get_user_by_id(self, user_id: str) -> UserRecord: ...

    def get_all_users(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[UserRecord]: ...

    # Posts
    def get_posts_by_user_id(
        self, user_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[PostRecord]: ...

    def get_all_posts(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[PostRecord]: ...

    def get_post_by_id(self, post_id: str) -> PostRecord: ...

    def create_post(
        self, post_id: str, text: str, author_id: str, commentable: bool
    ) -> PostRecord: ...

    # Comments
    def get_all_comments(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]: ...

    def get_comments_by_post_id(
        self, post_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]: ...

    def get_comments_by_parent_id(
        self, parent_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]: ...

    def get_comments_by_user_id(
        self, user_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]: ...

    def get_comment_by_id(self, comment_id: str) -> CommentRecord: ...

    def create_comment(
        self,
        comment_id: str,
        text: str,
        author_id: str,
        post_id: str,
        parent_comment_id: str | None = None,
    ) -> CommentRecord: ...
