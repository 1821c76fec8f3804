"""Blocking work in resolvers stays off the event loop."""

import asyncio

from threadboard.core import security
from threadboard.repositories import MemoryStorage, SqlStorage


def _on_event_loop() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


def test_password_hashing_runs_in_threadpool(graphql, storage, monkeypatch) -> None:
    seen = []
    real_hash = security.hash_password

    def _spy(password: str) -> str:
        seen.append(_on_event_loop())
        return real_hash(password)

    monkeypatch.setattr(security, "hash_password", _spy)
    body = graphql('mutation { registerUser(username: "frank", password: "pw") { id } }')

    assert "errors" not in body
    assert seen == [False]


def test_login_runs_in_threadpool(graphql, storage, test_user, monkeypatch) -> None:
    seen = []
    real_verify = security.verify_password

    def _spy(password: str, hashed: str) -> bool:
        seen.append(_on_event_loop())
        return real_verify(password, hashed)

    monkeypatch.setattr(security, "verify_password", _spy)
    body = graphql('mutation { loginUser(username: "alice", password: "password1") { token } }')

    assert body["data"]["loginUser"]["token"]
    assert seen == [False]


def test_nested_lookups_run_in_threadpool(
    graphql, storage, comment_service, test_post, test_user, monkeypatch
) -> None:
    top = comment_service.create_comment("top", test_post.id, test_user.id)
    comment_service.create_comment("reply", top.id, test_user.id)
    comment_service.create_comment("another", top.id, test_user.id)

    seen = []
    storage_cls = type(storage)
    assert storage_cls in (MemoryStorage, SqlStorage)
    real_replies = storage_cls.get_comments_by_parent_id
    real_user = storage_cls.get_user_by_id

    def _replies_spy(self, *args, **kwargs):
        seen.append(_on_event_loop())
        return real_replies(self, *args, **kwargs)

    def _user_spy(self, *args, **kwargs):
        seen.append(_on_event_loop())
        return real_user(self, *args, **kwargs)

    monkeypatch.setattr(storage_cls, "get_comments_by_parent_id", _replies_spy)
    monkeypatch.setattr(storage_cls, "get_user_by_id", _user_spy)

    body = graphql(
        "query Q($id: ID!) { post(id: $id) { comments { replies { id authorComment { username } } } } }",
        {"id": test_post.id},
    )

    assert "errors" not in body
    replies = body["data"]["post"]["comments"][0]["replies"]
    assert [r["authorComment"]["username"] for r in replies] == ["alice", "alice"]
    assert seen and not any(seen)
