"""Shared API dependencies for authentication and storage selection."""

import logging
from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from threadboard.core.errors import AuthenticationError
from threadboard.core.security import decode_access_token
from threadboard.core.settings import settings
from threadboard.db.session import SessionLocal
from threadboard.repositories import SqlStorage, Storage, get_memory_storage

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def get_storage() -> Generator[Storage, None, None]:
    """Yield the storage backend selected by ``STORAGE_BACKEND``.

    The SQL backend gets a fresh session per request; the memory backend is
    shared by the whole process.
    """
    if settings.storage_backend == "memory":
        yield get_memory_storage()
        return

    db = SessionLocal()
    try:
        yield SqlStorage(db)
    finally:
        db.close()


def get_current_user_id(
    authorization: Annotated[str | None, Header()] = None,
) -> str | None:
    """Return the user id carried by the bearer token, if any.

    Requests without an ``Authorization`` header are anonymous. A header that
    is present but is not a valid bearer token rejects the whole request.

    Raises:
        HTTPException: 403 if the header or token is invalid.
    """
    if not authorization:
        return None

    if not authorization.startswith(BEARER_PREFIX):
        logger.info("Rejected request with non-bearer Authorization header")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token",
        )

    token = authorization[len(BEARER_PREFIX):].strip()
    try:
        return decode_access_token(token)
    except AuthenticationError as err:
        logger.info("Rejected request with invalid bearer token")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token",
        ) from err


# Type aliases for dependency injection
StorageDep = Annotated[Storage, Depends(get_storage)]
CurrentUserIdDep = Annotated[str | None, Depends(get_current_user_id)]
