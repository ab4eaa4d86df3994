"""Base class for PostgreSQL repositories."""

from sqlalchemy import Executable, Result
from sqlalchemy.ext.asyncio import AsyncSession

from updoot.persistence.database import session_lock


class PostgresRepository:
    """Holds the session and serializes statements sent on it."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(self, stmt: Executable) -> Result:
        """Run one statement; the returned result is already buffered."""
        async with session_lock(self.session):
            return await self.session.execute(stmt)
