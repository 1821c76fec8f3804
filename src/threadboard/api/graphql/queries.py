"""Root query type."""

import strawberry
from strawberry.types import Info

from threadboard.api.graphql.context import Context
from threadboard.api.graphql.types import Comment, Limit, Offset, Post, User


@strawberry.type
class Query:
    @strawberry.field(description="All users")
    async def users(
        self, info: Info[Context, None], limit: Limit = None, offset: Offset = None
    ) -> list[User]:
        records = await info.context.run(info.context.users.list_users, limit, offset)
        return [User.from_record(user) for user in records]

    @strawberry.field(description="A user by id")
    async def user(self, info: Info[Context, None], id: strawberry.ID) -> User:
        return User.from_record(await info.context.run(info.context.users.get_user_by_id, id))

    @strawberry.field(description="A user by username")
    async def user_by_username(self, info: Info[Context, None], username: str) -> User:
        record = await info.context.run(info.context.users.get_user_by_username, username)
        return User.from_record(record)

    @strawberry.field(description="All posts")
    async def posts(
        self, info: Info[Context, None], limit: Limit = None, offset: Offset = None
    ) -> list[Post]:
        records = await info.context.run(info.context.posts.list_posts, limit, offset)
        return [Post.from_record(post) for post in records]

    @strawberry.field(description="Posts written by one user")
    async def posts_by_user_id(
        self,
        info: Info[Context, None],
        user_id: strawberry.ID,
        limit: Limit = None,
        offset: Offset = None,
    ) -> list[Post]:
        records = await info.context.run(
            info.context.posts.list_posts_by_user, user_id, limit, offset
        )
        return [Post.from_record(post) for post in records]

    @strawberry.field(description="A post by id")
    async def post(self, info: Info[Context, None], id: strawberry.ID) -> Post:
        return Post.from_record(await info.context.run(info.context.posts.get_post, id))

    @strawberry.field(description="All comments and replies")
    async def comments(
        self, info: Info[Context, None], limit: Limit = None, offset: Offset = None
    ) -> list[Comment]:
        records = await info.context.run(info.context.comments.list_comments, limit, offset)
        return [Comment.from_record(comment) for comment in records]

    @strawberry.field(description="A comment by id")
    async def comment(self, info: Info[Context, None], id: strawberry.ID) -> Comment:
        return Comment.from_record(await info.context.run(info.context.comments.get_comment, id))
