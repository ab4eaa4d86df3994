"""In-memory password reset token store for testing."""

import time
from typing import Optional

from updoot.domain.repository.reset_token import PasswordResetTokenStore
from updoot.domain.value import UserId


class InMemoryPasswordResetTokenStore(PasswordResetTokenStore):
    """In-memory implementation of PasswordResetTokenStore for testing."""

    def __init__(self) -> None:
        self._tokens: dict[str, tuple[UserId, float]] = {}

    async def save(self, token: str, user_id: UserId, ttl_seconds: int) -> None:
        """Store a token with an expiry time."""
        self._tokens[token] = (user_id, time.monotonic() + ttl_seconds)

    async def get(self, token: str) -> Optional[UserId]:
        """Look up the user for a token, dropping it if expired."""
        entry = self._tokens.get(token)
        if entry is None:
            return None
        user_id, expires_at = entry
        if time.monotonic() >= expires_at:
            del self._tokens[token]
            return None
        return user_id

    async def delete(self, token: str) -> None:
        """Invalidate a token."""
        self._tokens.pop(token, None)
