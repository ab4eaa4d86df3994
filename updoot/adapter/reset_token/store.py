"""Redis-backed password reset token store."""

from typing import Optional

import logfire
from redis.asyncio import Redis
from redis.exceptions import RedisError

from updoot.adapter.error import AdapterError
from updoot.config import RedisSettings
from updoot.domain.repository import PasswordResetTokenStore
from updoot.domain.value import UserId


class RedisPasswordResetTokenStore(PasswordResetTokenStore):
    """Stores `<prefix><token> -> user_id` keys with a Redis TTL."""

    def __init__(self, client: Redis, settings: RedisSettings) -> None:
        """Initialize token store.

        Args:
            client: Redis client (decode_responses=True)
            settings: Redis settings (key prefix)
        """
        self.client = client
        self.settings = settings

    def _key(self, token: str) -> str:
        return f"{self.settings.reset_token_prefix}{token}"

    async def save(self, token: str, user_id: UserId, ttl_seconds: int) -> None:
        """Store a token for a user."""
        try:
            await self.client.set(self._key(token), str(user_id), ex=ttl_seconds)
        except RedisError as e:
            logfire.error("Failed to store reset token", error=str(e))
            raise AdapterError(f"Failed to store reset token: {e}") from e

    async def get(self, token: str) -> Optional[UserId]:
        """Look up the user for a token."""
        try:
            value = await self.client.get(self._key(token))
        except RedisError as e:
            logfire.error("Failed to read reset token", error=str(e))
            raise AdapterError(f"Failed to read reset token: {e}") from e

        if value is None:
            return None
        try:
            return UserId(int(value))
        except ValueError:
            logfire.warn("Malformed reset token value", value=value)
            return None

    async def delete(self, token: str) -> None:
        """Invalidate a token."""
        try:
            await self.client.delete(self._key(token))
        except RedisError as e:
            logfire.error("Failed to delete reset token", error=str(e))
            raise AdapterError(f"Failed to delete reset token: {e}") from e
