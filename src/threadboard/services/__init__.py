# src/threadboard/services/__init__.py
"""Business logic services for the Threadboard application."""

from .comment_service import CommentService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "CommentService",
    "PostService",
    "UserService",
]
