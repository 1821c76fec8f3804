# src/threadboard/models/__init__.py
"""SQLAlchemy models for the Threadboard application."""

from .comment import Comment
from .post import Post
from .user import User

__all__ = [
    "Comment",
    "Post",
    "User",
]
