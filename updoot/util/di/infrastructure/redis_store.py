"""Redis infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from redis.asyncio import Redis

from updoot.adapter.reset_token import RedisPasswordResetTokenStore
from updoot.config import RedisSettings
from updoot.domain.repository import PasswordResetTokenStore
from updoot.util.di.base import ProviderBase


class RedisProvider(ProviderBase):
    """Redis component base."""

    __mock_component__ = "redis"


class ProdRedisProvider(RedisProvider):
    """Production Redis provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_redis_client(self, settings: RedisSettings) -> AsyncIterator[Redis]:
        """Provide Redis client, closed when the container closes."""
        client = Redis.from_url(settings.url, decode_responses=True)
        yield client
        await client.aclose()

    @provide(scope=Scope.APP)
    def get_reset_token_store(
        self, client: Redis, settings: RedisSettings
    ) -> PasswordResetTokenStore:
        """Provide Redis-backed reset token store."""
        return RedisPasswordResetTokenStore(client, settings)
