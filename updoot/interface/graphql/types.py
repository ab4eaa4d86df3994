"""GraphQL object and input types.

Timestamps are exposed as strings of integer milliseconds since the epoch,
which is also the format of the feed cursor.
"""

from typing import Optional

import strawberry
from strawberry.types import Info

from updoot.application.usecase.auth import AuthResponse, UserItem
from updoot.application.usecase.post import ListPostsResponse, PostItem
from updoot.domain.error import NotFoundError
from updoot.domain.value import PostId, UserId, VoteKey, to_millis

from .context import Context


@strawberry.type
class User:
    id: int
    username: str
    email: str
    created_at: str
    updated_at: str

    @classmethod
    def from_item(cls, item: UserItem) -> "User":
        return cls(
            id=item.id,
            username=item.username,
            email=item.email,
            created_at=str(to_millis(item.created_at)),
            updated_at=str(to_millis(item.updated_at)),
        )


@strawberry.type
class Post:
    id: int
    title: str
    text: str
    text_snippet: str
    points: int
    creator_id: int
    created_at: str
    updated_at: str

    @classmethod
    def from_item(cls, item: PostItem) -> "Post":
        return cls(
            id=item.id,
            title=item.title,
            text=item.text,
            text_snippet=item.text_snippet,
            points=item.points,
            creator_id=item.creator_id,
            created_at=str(to_millis(item.created_at)),
            updated_at=str(to_millis(item.updated_at)),
        )

    @strawberry.field
    async def creator(self, info: Info[Context, None]) -> User:
        """Post author, batched across the page."""
        user = await info.context.loaders.users.load(UserId(self.creator_id))
        if user is None:
            raise NotFoundError("User", str(self.creator_id))
        return User.from_item(UserItem.from_domain(user))

    @strawberry.field
    async def vote_status(self, info: Info[Context, None]) -> Optional[int]:
        """Session user's vote on this post: 1, -1, or null."""
        user_id = info.context.user_id
        if user_id is None:
            return None
        vote = await info.context.loaders.updoots.load(
            VoteKey(user_id, PostId(self.id))
        )
        return vote.value.value if vote else None


@strawberry.type
class PaginatedPosts:
    posts: list[Post]
    has_more: bool

    @classmethod
    def from_response(cls, response: ListPostsResponse) -> "PaginatedPosts":
        return cls(
            posts=[Post.from_item(item) for item in response.posts],
            has_more=response.has_more,
        )


@strawberry.type
class FieldError:
    field: str
    message: str


@strawberry.type
class UserResponse:
    errors: Optional[list[FieldError]] = None
    user: Optional[User] = None

    @classmethod
    def from_response(cls, response: AuthResponse) -> "UserResponse":
        if response.errors:
            return cls(
                errors=[
                    FieldError(field=e.field, message=e.message)
                    for e in response.errors
                ]
            )
        return cls(user=User.from_item(response.user) if response.user else None)


@strawberry.input
class UsernamePasswordInput:
    username: str
    email: str
    password: str


@strawberry.input
class PostInput:
    title: str
    text: str
