"""Per-request GraphQL context."""

import asyncio
from collections.abc import Callable
from typing import Any, TypeVar

from fastapi.concurrency import run_in_threadpool
from strawberry.fastapi import BaseContext

from threadboard.api.dependencies import CurrentUserIdDep, StorageDep
from threadboard.core.errors import AuthenticationError
from threadboard.repositories.base import Storage
from threadboard.services import CommentService, PostService, UserService

T = TypeVar("T")


class Context(BaseContext):
    """Services bound to the request's storage plus the caller's identity."""

    def __init__(self, storage: Storage, current_user_id: str | None = None) -> None:
        super().__init__()
        self.storage = storage
        self.current_user_id = current_user_id
        self.users = UserService(storage)
        self.posts = PostService(storage)
        self.comments = CommentService(storage)
        # One SQL session per request, so sibling resolvers take turns.
        self._storage_lock = asyncio.Lock()

    def require_user_id(self) -> str:
        """Return the authenticated user id or fail with "unauthorized"."""
        if self.current_user_id is None:
            raise AuthenticationError("unauthorized")
        return self.current_user_id

    async def run(self, func: Callable[..., T], *args: Any) -> T:
        """Call a blocking service method in the threadpool.

        Storage access and password hashing never run on the event loop.
        """
        async with self._storage_lock:
            return await run_in_threadpool(func, *args)


async def get_context(storage: StorageDep, current_user_id: CurrentUserIdDep) -> Context:
    """Build the context for one GraphQL request."""
    return Context(storage, current_user_id)
