"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .reset_token import InMemoryPasswordResetTokenStore
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryPasswordResetTokenStore",
    "InMemoryPostRepository",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
