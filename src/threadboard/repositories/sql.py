"""Data access helpers backed by a SQLAlchemy session."""
from __future__ import annotations

import logging
import uuid

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from threadboard.core.errors import AlreadyExistsError, NotFoundError
from threadboard.models import Comment, Post, User
from threadboard.repositories.pagination import validate_window
from threadboard.schemas import CommentRecord, PostRecord, UserRecord

__all__ = ["SqlStorage"]

logger = logging.getLogger(__name__)


class SqlStorage:
    """Thin wrapper around database access for users, posts and comments."""

    def __init__(self, session: Session) -> None:
        """Initialize the storage with a SQLAlchemy session."""
        self.session = session

    def _page(self, stmt: Select, limit: int | None, offset: int | None) -> list:
        limit, offset = validate_window(limit, offset)
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.scalars(stmt))

    # --- Users ----------------------------------------------------------------------
    def get_user_by_username(self, username: str) -> UserRecord:
        user = self.session.scalars(select(User).where(User.username == username)).first()
        if user is None:
            raise NotFoundError("user not found")
        return UserRecord.model_validate(user)

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        user = User(id=str(uuid.uuid4()), username=username, password_hash=password_hash)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as err:
            self.session.rollback()
            logger.info("Rejected duplicate username %r", username)
            raise AlreadyExistsError("user already exists") from err
        self.session.refresh(user)
        return UserRecord.model_validate(user)

    def get_user_by_id(self, user_id: str) -> UserRecord:
        user = self.session.get(User, user_id)
        if user is None:
            raise NotFoundError("user not found")
        return UserRecord.model_validate(user)

    def get_all_users(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[UserRecord]:
        stmt = select(User).order_by(User.created_at, User.id)
        return [UserRecord.model_validate(row) for row in self._page(stmt, limit, offset)]

    # --- Posts ----------------------------------------------------------------------
    def get_posts_by_user_id(
        self, user_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[PostRecord]:
        stmt = (
            select(Post)
            .where(Post.author_id == user_id)
            .order_by(Post.created_at, Post.id)
        )
        return [PostRecord.model_validate(row) for row in self._page(stmt, limit, offset)]

    def get_all_posts(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[PostRecord]:
        stmt = select(Post).order_by(Post.created_at, Post.id)
        return [PostRecord.model_validate(row) for row in self._page(stmt, limit, offset)]

    def get_post_by_id(self, post_id: str) -> PostRecord:
        post = self.session.get(Post, post_id)
        if post is None:
            raise NotFoundError("post not found")
        return PostRecord.model_validate(post)

    def create_post(
        self, post_id: str, text: str, author_id: str, commentable: bool
    ) -> PostRecord:
        post = Post(id=post_id, text=text, author_id=author_id, commentable=commentable)
        self.session.add(post)
        self.session.commit()
        self.session.refresh(post)
        return PostRecord.model_validate(post)

    # --- Comments -------------------------------------------------------------------
    def get_all_comments(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]:
        stmt = select(Comment).order_by(Comment.created_at, Comment.id)
        return [CommentRecord.model_validate(row) for row in self._page(stmt, limit, offset)]

    def get_comments_by_post_id(
        self, post_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]:
        stmt = (
            select(Comment)
            .where(Comment.post_id == post_id, Comment.parent_comment_id.is_(None))
            .order_by(Comment.created_at, Comment.id)
        )
        return [CommentRecord.model_validate(row) for row in self._page(stmt, limit, offset)]

    def get_comments_by_parent_id(
        self, parent_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]:
        stmt = (
            select(Comment)
            .where(Comment.parent_comment_id == parent_id)
            .order_by(Comment.created_at, Comment.id)
        )
        return [CommentRecord.model_validate(row) for row in self._page(stmt, limit, offset)]

    def get_comments_by_user_id(
        self, user_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]:
        stmt = (
            select(Comment)
            .where(Comment.author_id == user_id)
            .order_by(Comment.created_at, Comment.id)
        )
        return [CommentRecord.model_validate(row) for row in self._page(stmt, limit, offset)]

    def get_comment_by_id(self, comment_id: str) -> CommentRecord:
        comment = self.session.get(Comment, comment_id)
        if comment is None:
            raise NotFoundError("comment not found")
        return CommentRecord.model_validate(comment)

    def create_comment(
        self,
        comment_id: str,
        text: str,
        author_id: str,
        post_id: str,
        parent_comment_id: str | None = None,
    ) -> CommentRecord:
        comment = Comment(
            id=comment_id,
            comment=text,
            author_id=author_id,
            post_id=post_id,
            parent_comment_id=parent_comment_id,
        )
        self.session.add(comment)
        self.session.commit()
        self.session.refresh(comment)
        return CommentRecord.model_validate(comment)
