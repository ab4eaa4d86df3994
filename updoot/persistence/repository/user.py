"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import func, insert, select, update

from updoot.domain.model import User
from updoot.domain.repository import UserRepository
from updoot.domain.value import UserId
from updoot.persistence.database import session_lock
from updoot.persistence.mappers import row_to_user
from updoot.persistence.repository.base import PostgresRepository
from updoot.persistence.tables import users_table


class PostgresUserRepository(PostgresRepository, UserRepository):
    """PostgreSQL implementation of UserRepository."""

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find many users in one query (batch query)."""
        if not user_ids:
            return []

        with logfire.span("user_repository.find_by_ids", count=len(user_ids)):
            stmt = select(users_table).where(users_table.c.id.in_(user_ids))
            result = await self._execute(stmt)
            return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def create(self, username: str, email: str, password_hash: str) -> User:
        """Insert a new user.

        Runs in a savepoint so a unique violation does not abort the rest
        of the request's transaction.
        """
        stmt = (
            insert(users_table)
            .values(username=username, email=email, password=password_hash)
            .returning(users_table)
        )
        async with session_lock(self.session):
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.fetchone()
        return row_to_user(row._asdict())

    async def update_password(self, user_id: UserId, password_hash: str) -> None:
        """Replace a user's password hash."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(password=password_hash, updated_at=func.now())
        )
        await self._execute(stmt)
