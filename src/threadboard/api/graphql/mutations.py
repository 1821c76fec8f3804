"""Root mutation type."""

import strawberry
from strawberry.types import Info

from threadboard.api.graphql.context import Context
from threadboard.api.graphql.types import Comment, Post, Token, User


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Create an account")
    async def register_user(
        self, info: Info[Context, None], username: str, password: str
    ) -> User:
        record = await info.context.run(info.context.users.register, username, password)
        return User.from_record(record)

    @strawberry.mutation(description="Exchange credentials for a bearer token")
    async def login_user(self, info: Info[Context, None], username: str, password: str) -> Token:
        token = await info.context.run(info.context.users.login, username, password)
        return Token(token=token)

    @strawberry.mutation(description="Publish a post as the authenticated user")
    async def create_post(
        self,
        info: Info[Context, None],
        text: str,
        permission_to_comment: bool = True,
    ) -> Post:
        author_id = info.context.require_user_id()
        record = await info.context.run(
            info.context.posts.create_post, text, author_id, permission_to_comment
        )
        return Post.from_record(record)

    @strawberry.mutation(description="Comment on a post or reply to a comment")
    async def create_comment(
        self, info: Info[Context, None], comment_text: str, item_id: strawberry.ID
    ) -> Comment:
        author_id = info.context.require_user_id()
        record = await info.context.run(
            info.context.comments.create_comment, comment_text, item_id, author_id
        )
        return Comment.from_record(record)
