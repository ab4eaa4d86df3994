"""GraphQL schema: queries and mutations.

Resolvers stay thin. They build a use case request from the arguments and
the session, run the use case from the dishka request container, and map
the result onto GraphQL types. Domain errors propagate and are reported as
GraphQL errors.
"""

from typing import Optional

import logfire
import strawberry
from graphql import GraphQLError
from strawberry.types import ExecutionContext, Info

from updoot.application.usecase.auth import (
    ChangePasswordRequest,
    ChangePasswordUseCase,
    ForgotPasswordRequest,
    ForgotPasswordUseCase,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from updoot.application.usecase.auth.common import AuthResponse
from updoot.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from updoot.application.usecase.vote import VoteRequest, VoteUseCase
from updoot.domain.error import DomainError
from updoot.domain.value import UserId

from .context import Context
from .types import (
    PaginatedPosts,
    Post,
    PostInput,
    User,
    UsernamePasswordInput,
    UserResponse,
)


def _finish_auth(info: Info[Context, None], response: AuthResponse) -> UserResponse:
    """Start a session if the auth mutation succeeded."""
    if response.user and response.token:
        info.context.start_session(UserId(response.user.id), response.token)
    return UserResponse.from_response(response)


@strawberry.type
class Query:
    @strawberry.field
    async def posts(
        self, info: Info[Context, None], limit: int, cursor: Optional[str] = None
    ) -> PaginatedPosts:
        """Feed page, newest first."""
        use_case = await info.context.container.get(ListPostsUseCase)
        response = await use_case.execute(ListPostsRequest(limit=limit, cursor=cursor))
        return PaginatedPosts.from_response(response)

    @strawberry.field
    async def post(self, info: Info[Context, None], id: int) -> Optional[Post]:
        use_case = await info.context.container.get(GetPostUseCase)
        item = await use_case.execute(GetPostRequest(post_id=id))
        return Post.from_item(item) if item else None

    @strawberry.field
    async def current_user(self, info: Info[Context, None]) -> Optional[User]:
        use_case = await info.context.container.get(GetCurrentUserUseCase)
        item = await use_case.execute(
            GetCurrentUserRequest(user_id=info.context.user_id)
        )
        return User.from_item(item) if item else None


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def register(
        self, info: Info[Context, None], options: UsernamePasswordInput
    ) -> UserResponse:
        use_case = await info.context.container.get(RegisterUseCase)
        response = await use_case.execute(
            RegisterRequest(
                username=options.username,
                email=options.email,
                password=options.password,
            )
        )
        return _finish_auth(info, response)

    @strawberry.mutation
    async def login(
        self, info: Info[Context, None], username_or_email: str, password: str
    ) -> UserResponse:
        use_case = await info.context.container.get(LoginUseCase)
        response = await use_case.execute(
            LoginRequest(username_or_email=username_or_email, password=password)
        )
        return _finish_auth(info, response)

    @strawberry.mutation
    def logout(self, info: Info[Context, None]) -> bool:
        info.context.end_session()
        return True

    @strawberry.mutation
    async def forgot_password(self, info: Info[Context, None], email: str) -> bool:
        use_case = await info.context.container.get(ForgotPasswordUseCase)
        return await use_case.execute(ForgotPasswordRequest(email=email))

    @strawberry.mutation
    async def change_password(
        self, info: Info[Context, None], token: str, new_password: str
    ) -> UserResponse:
        use_case = await info.context.container.get(ChangePasswordUseCase)
        response = await use_case.execute(
            ChangePasswordRequest(token=token, new_password=new_password)
        )
        return _finish_auth(info, response)

    @strawberry.mutation
    async def create_post(self, info: Info[Context, None], input: PostInput) -> Post:
        use_case = await info.context.container.get(CreatePostUseCase)
        item = await use_case.execute(
            CreatePostRequest(
                title=input.title, text=input.text, user_id=info.context.user_id
            )
        )
        return Post.from_item(item)

    @strawberry.mutation
    async def update_post(
        self,
        info: Info[Context, None],
        id: int,
        title: Optional[str] = None,
        text: Optional[str] = None,
    ) -> Optional[Post]:
        use_case = await info.context.container.get(UpdatePostUseCase)
        item = await use_case.execute(
            UpdatePostRequest(
                post_id=id, title=title, text=text, user_id=info.context.user_id
            )
        )
        return Post.from_item(item) if item else None

    @strawberry.mutation
    async def delete_post(self, info: Info[Context, None], id: int) -> bool:
        use_case = await info.context.container.get(DeletePostUseCase)
        return await use_case.execute(
            DeletePostRequest(post_id=id, user_id=info.context.user_id)
        )

    @strawberry.mutation
    async def vote(
        self, info: Info[Context, None], post_id: int, value: int
    ) -> Optional[int]:
        """Cast, flip or retract a vote; returns the post's new points."""
        use_case = await info.context.container.get(VoteUseCase)
        response = await use_case.execute(
            VoteRequest(post_id=post_id, value=value, user_id=info.context.user_id)
        )
        return response.points if response else None


class UpdootSchema(strawberry.Schema):
    """Schema that reports resolver errors through logfire."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if isinstance(original, DomainError):
                logfire.info(
                    "GraphQL domain error",
                    error_type=type(original).__name__,
                    message=error.message,
                    path=error.path,
                )
            else:
                logfire.error(
                    "GraphQL error",
                    error_type=type(original).__name__ if original else None,
                    message=error.message,
                    path=error.path,
                )


schema = UpdootSchema(query=Query, mutation=Mutation)
