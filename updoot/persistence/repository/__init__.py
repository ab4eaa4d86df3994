"""PostgreSQL repository implementations."""

from updoot.persistence.repository.post import PostgresPostRepository
from updoot.persistence.repository.transaction import PostgresTransactionManager
from updoot.persistence.repository.user import PostgresUserRepository
from updoot.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresVoteRepository",
    "PostgresTransactionManager",
]
