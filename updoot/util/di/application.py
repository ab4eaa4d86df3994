"""Application layer DI providers."""

from dishka import Scope, provide

from updoot.application.loader import Loaders, create_loaders
from updoot.application.usecase.auth import (
    ChangePasswordUseCase,
    ForgotPasswordUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from updoot.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from updoot.application.usecase.vote import VoteUseCase
from updoot.config import Settings
from updoot.domain.repository import PostRepository, UserRepository, VoteRepository
from updoot.domain.service import (
    JWTService,
    PasswordResetService,
    PostService,
    UserService,
    VoteService,
)
from updoot.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Batch loaders: fresh per request so batches and caches never cross requests
    @provide(scope=Scope.REQUEST)
    def get_loaders(
        self, user_repository: UserRepository, vote_repository: VoteRepository
    ) -> Loaders:
        """Provide request-scoped batch loaders."""
        return create_loaders(user_repository, vote_repository)

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_forgot_password_use_case(
        self, password_reset_service: PasswordResetService
    ) -> ForgotPasswordUseCase:
        """Provide forgot password use case."""
        return ForgotPasswordUseCase(password_reset_service=password_reset_service)

    @provide(scope=Scope.REQUEST)
    def get_change_password_use_case(
        self,
        password_reset_service: PasswordResetService,
        jwt_service: JWTService,
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(
            password_reset_service=password_reset_service, jwt_service=jwt_service
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, post_repository: PostRepository, settings: Settings
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_repository=post_repository, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, settings: Settings
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_service: PostService, settings: Settings
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self, post_service: PostService, settings: Settings
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_use_case(self, vote_service: VoteService) -> VoteUseCase:
        """Provide vote use case."""
        return VoteUseCase(vote_service=vote_service)
