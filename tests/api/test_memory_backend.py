"""Requests served by the process-wide in-memory store."""

from collections.abc import Iterator

import pytest

from threadboard.core.settings import settings
from threadboard.repositories.memory import get_memory_storage, reset_memory_storage


@pytest.fixture()
def memory_backend(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setattr(settings, "storage_backend", "memory")
    reset_memory_storage()
    try:
        yield
    finally:
        reset_memory_storage()


def test_state_survives_between_requests(graphql, memory_backend) -> None:
    registered = graphql(
        'mutation { registerUser(username: "dora", password: "pw") { id } }'
    )
    user_id = registered["data"]["registerUser"]["id"]

    body = graphql('query { userByUsername(username: "dora") { id } }')
    assert body["data"]["userByUsername"]["id"] == user_id
    assert get_memory_storage().get_user_by_id(user_id).username == "dora"


def test_reset_starts_from_empty(graphql, memory_backend) -> None:
    get_memory_storage().create_user("erin", "hash")
    reset_memory_storage()

    assert graphql("query { users { id } }")["data"]["users"] == []
