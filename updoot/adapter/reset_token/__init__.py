"""Password reset token storage adapters."""

from .store import RedisPasswordResetTokenStore

__all__ = ["RedisPasswordResetTokenStore"]
