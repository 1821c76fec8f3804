# src/threadboard/models/comment.py
"""SQLAlchemy model for comments and replies."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from threadboard.db.session import Base
from threadboard.db.time import utcnow

COMMENT_MAX_LENGTH = 2000


class Comment(Base):
    """A node of the comment tree.

    The hierarchy is an adjacency list: every row points at the post it lives
    under, and replies additionally point at the comment they answer.
    Top-level comments have ``parent_comment_id = NULL``.
    """

    __tablename__ = "comment"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    comment: Mapped[str] = mapped_column(String(COMMENT_MAX_LENGTH), nullable=False)
    author_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    # Always the root post, even for replies several levels deep.
    post_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("post.id"),
        nullable=False,
        index=True,
    )
    parent_comment_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("comment.id"),
        nullable=True,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
