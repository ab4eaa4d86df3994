"""Repository interfaces for the Updoot domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from updoot.domain.repository.post import PostRepository
from updoot.domain.repository.reset_token import PasswordResetTokenStore
from updoot.domain.repository.transaction import TransactionManager, TransactionScope
from updoot.domain.repository.user import UserRepository
from updoot.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "VoteRepository",
    "PasswordResetTokenStore",
    "TransactionManager",
    "TransactionScope",
]
