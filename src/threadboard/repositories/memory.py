"""In-process storage backend kept in plain dictionaries."""
from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable
from threading import Lock
from typing import TypeVar

from threadboard.core.errors import AlreadyExistsError, NotFoundError
from threadboard.repositories.pagination import paginate
from threadboard.schemas import CommentRecord, PostRecord, UserRecord

__all__ = ["MemoryStorage", "get_memory_storage", "reset_memory_storage"]

R = TypeVar("R")


class MemoryStorage:
    """Storage implementation backed by dicts and a single lock.

    Dicts keep insertion order, which doubles as creation order for listings.
    Records are immutable, so they can be handed out without copying.
    """

    def __init__(self) -> None:
        self._users: dict[str, UserRecord] = {}
        self._posts: dict[str, PostRecord] = {}
        self._comments: dict[str, CommentRecord] = {}
        self._lock = Lock()

    def _select(
        self,
        rows: Iterable[R],
        predicate: Callable[[R], bool],
        limit: int | None,
        offset: int | None,
    ) -> list[R]:
        with self._lock:
            matching = [row for row in rows if predicate(row)]
        return paginate(matching, limit, offset)

    # --- Users ----------------------------------------------------------------------
    def get_user_by_username(self, username: str) -> UserRecord:
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return user
        raise NotFoundError("user not found")

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        with self._lock:
            if any(user.username == username for user in self._users.values()):
                raise AlreadyExistsError("user already exists")
            user = UserRecord(
                id=str(uuid.uuid4()),
                username=username,
                password_hash=password_hash,
            )
            self._users[user.id] = user
        return user

    def get_user_by_id(self, user_id: str) -> UserRecord:
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise NotFoundError("user not found")
        return user

    def get_all_users(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[UserRecord]:
        return self._select(self._users.values(), lambda _: True, limit, offset)

    # --- Posts ----------------------------------------------------------------------
    def get_posts_by_user_id(
        self, user_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[PostRecord]:
        return self._select(
            self._posts.values(), lambda post: post.author_id == user_id, limit, offset
        )

    def get_all_posts(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[PostRecord]:
        return self._select(self._posts.values(), lambda _: True, limit, offset)

    def get_post_by_id(self, post_id: str) -> PostRecord:
        with self._lock:
            post = self._posts.get(post_id)
        if post is None:
            raise NotFoundError("post not found")
        return post

    def create_post(
        self, post_id: str, text: str, author_id: str, commentable: bool
    ) -> PostRecord:
        post = PostRecord(id=post_id, text=text, author_id=author_id, commentable=commentable)
        with self._lock:
            if post_id in self._posts:
                raise AlreadyExistsError("post already exists")
            self._posts[post_id] = post
        return post

    # --- Comments -------------------------------------------------------------------
    def get_all_comments(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]:
        return self._select(self._comments.values(), lambda _: True, limit, offset)

    def get_comments_by_post_id(
        self, post_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]:
        return self._select(
            self._comments.values(),
            lambda c: c.post_id == post_id and c.parent_comment_id is None,
            limit,
            offset,
        )

    def get_comments_by_parent_id(
        self, parent_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]:
        return self._select(
            self._comments.values(),
            lambda c: c.parent_comment_id == parent_id,
            limit,
            offset,
        )

    def get_comments_by_user_id(
        self, user_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[CommentRecord]:
        return self._select(
            self._comments.values(), lambda c: c.author_id == user_id, limit, offset
        )

    def get_comment_by_id(self, comment_id: str) -> CommentRecord:
        with self._lock:
            comment = self._comments.get(comment_id)
        if comment is None:
            raise NotFoundError("comment not found")
        return comment

    def create_comment(
        self,
        comment_id: str,
        text: str,
        author_id: str,
        post_id: str,
        parent_comment_id: str | None = None,
    ) -> CommentRecord:
        comment = CommentRecord(
            id=comment_id,
            comment=text,
            author_id=author_id,
            post_id=post_id,
            parent_comment_id=parent_comment_id,
        )
        with self._lock:
            if post_id not in self._posts:
                raise NotFoundError("post not found")
            if parent_comment_id is not None and parent_comment_id not in self._comments:
                raise NotFoundError("comment not found")
            self._comments[comment_id] = comment
        return comment


_STORAGE: MemoryStorage | None = None
_STORAGE_LOCK = Lock()


def get_memory_storage() -> MemoryStorage:
    """Return the process-wide in-memory storage, creating it on first use."""
    global _STORAGE
    with _STORAGE_LOCK:
        if _STORAGE is None:
            _STORAGE = MemoryStorage()
        return _STORAGE


def reset_memory_storage() -> None:
    """Drop the process-wide in-memory storage (used by tests)."""
    global _STORAGE
    with _STORAGE_LOCK:
        _STORAGE = None
