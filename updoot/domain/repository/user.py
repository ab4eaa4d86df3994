"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from updoot.domain.model.user import User
from updoot.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find many users in one query (batch query).

        Order of the result is unspecified and missing IDs are skipped.

        Args:
            user_ids: Distinct user IDs

        Returns:
            Users that exist, in storage order
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, username: str, email: str, password_hash: str) -> User:
        """Insert a new user; the store assigns the ID.

        Args:
            username: Unique username
            email: Unique email
            password_hash: Hashed password

        Returns:
            The created user

        Raises:
            IntegrityError: If the username or email is taken
        """
        pass

    @abstractmethod
    async def update_password(self, user_id: UserId, password_hash: str) -> None:
        """Replace a user's password hash.

        Args:
            user_id: The user's unique identifier
            password_hash: New hashed password
        """
        pass
