# src/threadboard/schemas/__init__.py
"""Pydantic records exchanged between storage, services and the API."""

from .comment import CommentRecord
from .post import PostRecord
from .user import UserRecord

__all__ = ["CommentRecord", "PostRecord", "UserRecord"]
