"""Domain layer DI providers."""

from dishka import Scope, provide

from updoot.config import AuthSettings, Settings
from updoot.domain.repository import (
    PasswordResetTokenStore,
    PostRepository,
    TransactionManager,
    UserRepository,
)
from updoot.domain.service import (
    JWTService,
    MailClient,
    PasswordResetService,
    PasswordService,
    PostService,
    UserService,
    VoteService,
)
from updoot.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing service."""
        return PasswordService(rounds=auth_settings.bcrypt_rounds)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, password_service: PasswordService
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, password_service=password_service
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        transaction_manager: TransactionManager,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, transaction_manager=transaction_manager
        )

    @provide
    def get_vote_service(self, transaction_manager: TransactionManager) -> VoteService:
        """Provide vote domain service."""
        return VoteService(transaction_manager=transaction_manager)

    @provide
    def get_password_reset_service(
        self,
        token_store: PasswordResetTokenStore,
        user_service: UserService,
        mail_client: MailClient,
        settings: Settings,
    ) -> PasswordResetService:
        """Provide password reset domain service."""
        return PasswordResetService(
            token_store=token_store,
            user_service=user_service,
            mail_client=mail_client,
            settings=settings,
        )
