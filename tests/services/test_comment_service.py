"""Tests for comment creation on posts and on other comments."""

import uuid

import pytest

from threadboard.core.errors import NotFoundError, PermissionDeniedError, ValidationError


def test_comment_on_post_is_top_level(comment_service, test_post, other_user) -> None:
    comment = comment_service.create_comment("Nice post", test_post.id, other_user.id)
    assert comment.post_id == test_post.id
    assert comment.parent_comment_id is None
    assert comment.author_id == other_user.id
    assert [c.id for c in comment_service.list_comments_by_post(test_post.id)] == [comment.id]


def test_reply_inherits_post_and_points_at_parent(comment_service, test_post, test_user) -> None:
    top = comment_service.create_comment("top", test_post.id, test_user.id)
    reply = comment_service.create_comment("reply", top.id, test_user.id)
    nested = comment_service.create_comment("nested", reply.id, test_user.id)

    assert reply.post_id == test_post.id
    assert reply.parent_comment_id == top.id
    assert nested.post_id == test_post.id
    assert nested.parent_comment_id == reply.id

    assert [c.id for c in comment_service.list_comments_by_post(test_post.id)] == [top.id]
    assert [c.id for c in comment_service.list_replies(top.id)] == [reply.id]
    assert [c.id for c in comment_service.list_replies(reply.id)] == [nested.id]


def test_comment_on_locked_post_is_rejected(comment_service, locked_post, other_user) -> None:
    with pytest.raises(PermissionDeniedError, match="author turned off comments"):
        comment_service.create_comment("hi", locked_post.id, other_user.id)
    assert comment_service.list_comments() == []


def test_comment_on_unknown_item(comment_service, test_user) -> None:
    with pytest.raises(NotFoundError, match="item not found"):
        comment_service.create_comment("hi", str(uuid.uuid4()), test_user.id)


@pytest.mark.parametrize("text", ["", "   ", "\n\t", "x" * 2001])
def test_comment_length_limits(comment_service, test_post, test_user, text) -> None:
    with pytest.raises(ValidationError):
        comment_service.create_comment(text, test_post.id, test_user.id)


def test_comment_at_maximum_length(comment_service, test_post, test_user) -> None:
    comment = comment_service.create_comment("x" * 2000, test_post.id, test_user.id)
    assert comment_service.get_comment(comment.id).comment == "x" * 2000


def test_comment_by_unknown_author(comment_service, test_post) -> None:
    with pytest.raises(NotFoundError):
        comment_service.create_comment("hi", test_post.id, str(uuid.uuid4()))


def test_list_comments_by_user(comment_service, test_post, test_user, other_user) -> None:
    mine = comment_service.create_comment("mine", test_post.id, test_user.id)
    comment_service.create_comment("theirs", mine.id, other_user.id)
    assert [c.id for c in comment_service.list_comments_by_user(test_user.id)] == [mine.id]
    assert len(comment_service.list_comments()) == 2
    assert len(comment_service.list_comments(limit=1)) == 1


def test_blank_comment_is_rejected(comment_service, test_post, test_user) -> None:
    with pytest.raises(ValidationError, match="comment must not be empty"):
        comment_service.create_comment("   ", test_post.id, test_user.id)
    assert comment_service.list_comments_by_post(test_post.id) == []
