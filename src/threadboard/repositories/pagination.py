"""Offset/limit pagination shared by both storage backends."""
from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from threadboard.core.errors import ValidationError

T = TypeVar("T")


def validate_window(limit: int | None, offset: int | None) -> tuple[int | None, int]:
    """Normalize pagination arguments.

    A missing ``offset`` means 0 and a missing ``limit`` means "to the end".

    Raises:
        ValidationError: If either value is negative.
    """
    if limit is not None and limit < 0:
        raise ValidationError("limit must not be negative")
    if offset is not None and offset < 0:
        raise ValidationError("offset must not be negative")
    return limit, offset or 0


def paginate(items: Sequence[T], limit: int | None, offset: int | None) -> list[T]:
    """Return the ``[offset, offset + limit)`` window of ``items``."""
    limit, start = validate_window(limit, offset)
    if start >= len(items):
        return []
    end = len(items) if limit is None else start + limit
    return list(items[start:end])
