"""GraphQL object types.

Nested fields are resolved level by level: a post fetches its author and its
top-level comments, each comment fetches its author and replies, and so on
for as deep as the client asks.
"""

from typing import Annotated, Optional

import strawberry
from strawberry.types import Info

from threadboard.api.graphql.context import Context
from threadboard.schemas import CommentRecord, PostRecord, UserRecord

Limit = Annotated[Optional[int], strawberry.argument(description="Maximum number of items")]
Offset = Annotated[Optional[int], strawberry.argument(description="Number of items to skip")]


@strawberry.type(description="A registered user")
class User:
    id: strawberry.ID
    username: str

    @classmethod
    def from_record(cls, record: UserRecord) -> "User":
        return cls(id=strawberry.ID(record.id), username=record.username)

    @strawberry.field(description="Posts written by the user")
    async def posts(
        self, info: Info[Context, None], limit: Limit = None, offset: Offset = None
    ) -> list["Post"]:
        records = await info.context.run(info.context.users.list_posts, self.id, limit, offset)
        return [Post.from_record(record) for record in records]

    @strawberry.field(description="Comments and replies written by the user")
    async def comments(
        self, info: Info[Context, None], limit: Limit = None, offset: Offset = None
    ) -> list["Comment"]:
        records = await info.context.run(info.context.users.list_comments, self.id, limit, offset)
        return [Comment.from_record(record) for record in records]


@strawberry.type(description="A top-level content item")
class Post:
    id: strawberry.ID
    text: str
    author_id: strawberry.ID
    commentable: bool

    @classmethod
    def from_record(cls, record: PostRecord) -> "Post":
        return cls(
            id=strawberry.ID(record.id),
            text=record.text,
            author_id=strawberry.ID(record.author_id),
            commentable=record.commentable,
        )

    @strawberry.field(description="Author of the post")
    async def author_post(self, info: Info[Context, None]) -> User:
        record = await info.context.run(info.context.users.get_user_by_id, self.author_id)
        return User.from_record(record)

    @strawberry.field(description="Top-level comments under the post")
    async def comments(
        self, info: Info[Context, None], limit: Limit = None, offset: Offset = None
    ) -> list["Comment"]:
        records = await info.context.run(
            info.context.comments.list_comments_by_post, self.id, limit, offset
        )
        return [Comment.from_record(record) for record in records]


@strawberry.type(description="A comment on a post or a reply to another comment")
class Comment:
    id: strawberry.ID
    comment: str
    author_id: strawberry.ID
    post_id: strawberry.ID
    parent_comment_id: Optional[strawberry.ID]

    @classmethod
    def from_record(cls, record: CommentRecord) -> "Comment":
        parent_id = record.parent_comment_id
        return cls(
            id=strawberry.ID(record.id),
            comment=record.comment,
            author_id=strawberry.ID(record.author_id),
            post_id=strawberry.ID(record.post_id),
            parent_comment_id=strawberry.ID(parent_id) if parent_id is not None else None,
        )

    @strawberry.field(description="Author of the comment")
    async def author_comment(self, info: Info[Context, None]) -> User:
        record = await info.context.run(info.context.users.get_user_by_id, self.author_id)
        return User.from_record(record)

    @strawberry.field(description="Direct replies to the comment")
    async def replies(
        self, info: Info[Context, None], limit: Limit = None, offset: Offset = None
    ) -> list["Comment"]:
        records = await info.context.run(info.context.comments.list_replies, self.id, limit, offset)
        return [Comment.from_record(record) for record in records]


@strawberry.type(description="Bearer token returned by loginUser")
class Token:
    token: str
