"""Tests for the shared pagination window."""

import pytest

from threadboard.core.errors import ValidationError
from threadboard.repositories.pagination import paginate, validate_window

ITEMS = ["a", "b", "c", "d", "e"]


@pytest.mark.parametrize(
    ("limit", "offset", "expected"),
    [
        (None, None, ITEMS),
        (2, None, ["a", "b"]),
        (None, 3, ["d", "e"]),
        (2, 1, ["b", "c"]),
        (10, 3, ["d", "e"]),
        (0, 0, []),
        (2, 5, []),
        (2, 50, []),
    ],
)
def test_paginate_window(limit, offset, expected) -> None:
    assert paginate(ITEMS, limit, offset) == expected


@pytest.mark.parametrize(("limit", "offset"), [(-1, None), (None, -1), (-5, -5)])
def test_negative_values_are_rejected(limit, offset) -> None:
    with pytest.raises(ValidationError):
        paginate(ITEMS, limit, offset)


def test_validate_window_defaults_offset_to_zero() -> None:
    assert validate_window(None, None) == (None, 0)
    assert validate_window(3, None) == (3, 0)
