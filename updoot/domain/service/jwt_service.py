"""JWT session token domain service."""

import logfire

from updoot.config import AuthSettings
from updoot.domain.value import UserId
from updoot.util.error import JWTError
from updoot.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId, username: str) -> str:
        """Create a session token for a user.

        Args:
            user_id: User ID
            username: Username

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, username, self.auth_settings)
            logfire.info("Session token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and extract its payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        return verify_token(token, self.auth_settings)

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Extract the user ID from a session token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError as e:
            logfire.debug(
                "Session token rejected, treating as unauthenticated", error=str(e)
            )
            return None
        return UserId(payload.user_id)
