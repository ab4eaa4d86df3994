"""Password reset token store interface."""

from abc import ABC, abstractmethod
from typing import Optional

from updoot.domain.value import UserId


class PasswordResetTokenStore(ABC):
    """Short-lived mapping of reset token -> user ID.

    Tokens expire on their own after the configured TTL.
    """

    @abstractmethod
    async def save(self, token: str, user_id: UserId, ttl_seconds: int) -> None:
        """Store a token for a user.

        Args:
            token: Random URL-safe token
            user_id: User the token resets
            ttl_seconds: Lifetime of the token
        """
        pass

    @abstractmethod
    async def get(self, token: str) -> Optional[UserId]:
        """Look up the user for a token.

        Returns:
            User ID, or None if the token is unknown or expired
        """
        pass

    @abstractmethod
    async def delete(self, token: str) -> None:
        """Invalidate a token."""
        pass
