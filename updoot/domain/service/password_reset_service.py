"""Password reset domain service.

Forgot-password stores a random token in a short-lived store and emails a
link containing it. Changing the password consumes the token.
"""

import secrets
from abc import ABC, abstractmethod

import logfire

from updoot.config import Settings
from updoot.domain.error import InvalidCredentialsError, NotFoundError
from updoot.domain.model import User
from updoot.domain.repository import PasswordResetTokenStore

from .base import Service
from .user_service import UserService


class MailClient(ABC):
    """Outbound email port."""

    @abstractmethod
    async def send(self, to: str, subject: str, html: str) -> None:
        """Send an HTML email.

        Raises:
            MailError: If delivery failed
        """
        pass


class PasswordResetService(Service):
    """Domain service for the forgot/change password flow."""

    def __init__(
        self,
        token_store: PasswordResetTokenStore,
        user_service: UserService,
        mail_client: MailClient,
        settings: Settings,
    ) -> None:
        """Initialize password reset service.

        Args:
            token_store: Short-lived token storage
            user_service: User domain service
            mail_client: Sends the reset email
            settings: Application settings (TTL, frontend URL)
        """
        self.token_store = token_store
        self.user_service = user_service
        self.mail_client = mail_client
        self.settings = settings

    async def request_reset(self, email: str) -> bool:
        """Email a reset link if an account uses this address.

        Args:
            email: Account email

        Returns:
            True if a reset email was sent
        """
        with logfire.span("password_reset_service.request_reset"):
            user = await self.user_service.get_by_email(email)
            if user is None:
                logfire.info("Password reset for unknown email")
                return False

            token = secrets.token_urlsafe(24)
            await self.token_store.save(
                token, user.id, self.settings.redis.reset_token_ttl_seconds
            )

            link = f"{self.settings.api.frontend_url}/change-password/{token}"
            await self.mail_client.send(
                to=email,
                subject="Forgot Password",
                html=f'<a href="{link}">Reset Password</a>',
            )
            logfire.info("Password reset email sent", user_id=user.id)
            return True

    async def reset_password(self, token: str, new_password: str) -> User:
        """Set a new password using a reset token.

        Args:
            token: Token from the reset link
            new_password: Plain-text password (validated by the caller)

        Returns:
            The user whose password changed

        Raises:
            InvalidCredentialsError: If the token expired or its user is gone
        """
        with logfire.span("password_reset_service.reset_password"):
            user_id = await self.token_store.get(token)
            if user_id is None:
                logfire.info("Password reset with expired token")
                raise InvalidCredentialsError("token", "Token Expired")

            try:
                user = await self.user_service.change_password(user_id, new_password)
            except NotFoundError as e:
                logfire.warn("Password reset for missing user", user_id=user_id)
                raise InvalidCredentialsError("token", "Token Invalid") from e

            await self.token_store.delete(token)
            return user
