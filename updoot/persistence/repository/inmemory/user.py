"""In-memory user repository for testing."""

from datetime import datetime, timezone
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from updoot.domain.model.user import User
from updoot.domain.repository.user import UserRepository
from updoot.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._next_id = 1

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find many users; storage order, missing IDs skipped."""
        wanted = set(user_ids)
        return [user for uid, user in self._users.items() if uid in wanted]

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def create(self, username: str, email: str, password_hash: str) -> User:
        """Insert a new user.

        Raises:
            IntegrityError: If the username or email is taken
        """
        for field, value in (("username", username), ("email", email)):
            if any(getattr(u, field) == value for u in self._users.values()):
                raise IntegrityError(
                    f"Duplicate {field}",
                    None,
                    Exception(f"Key ({field})=({value}) already exists."),
                )

        now = datetime.now(timezone.utc)
        user = User(
            id=UserId(self._next_id),
            username=username,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        self._users[user.id] = user
        self._next_id += 1
        return user

    async def update_password(self, user_id: UserId, password_hash: str) -> None:
        """Replace a user's password hash."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(
                update={
                    "password_hash": password_hash,
                    "updated_at": datetime.now(timezone.utc),
                }
            )
