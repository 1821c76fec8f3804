"""Tests for post creation and listing."""

import uuid

import pytest

from threadboard.core.errors import NotFoundError, ValidationError


def test_create_post_assigns_uuid(post_service, test_user) -> None:
    post = post_service.create_post("Some text", test_user.id, commentable=False)
    assert uuid.UUID(post.id)
    assert post.author_id == test_user.id
    assert post.commentable is False
    assert post_service.get_post(post.id) == post


def test_create_post_defaults_to_commentable(post_service, test_user) -> None:
    assert post_service.create_post("Some text", test_user.id).commentable is True


@pytest.mark.parametrize("text", ["", "   "])
def test_create_post_rejects_blank_text(post_service, test_user, text) -> None:
    with pytest.raises(ValidationError):
        post_service.create_post(text, test_user.id)


def test_create_post_for_unknown_author(post_service) -> None:
    with pytest.raises(NotFoundError):
        post_service.create_post("orphan", str(uuid.uuid4()))


def test_list_posts(post_service, test_user, other_user) -> None:
    post_service.create_post("one", test_user.id)
    post_service.create_post("two", test_user.id)
    post_service.create_post("three", other_user.id)

    assert len(post_service.list_posts()) == 3
    assert len(post_service.list_posts(limit=2)) == 2
    assert post_service.list_posts(offset=3) == []
    assert {p.text for p in post_service.list_posts_by_user(test_user.id)} == {"one", "two"}
