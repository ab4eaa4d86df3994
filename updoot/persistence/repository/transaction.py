"""PostgreSQL transaction manager."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from updoot.domain.repository import TransactionManager, TransactionScope
from updoot.persistence.database import session_lock
from updoot.persistence.repository.post import PostgresPostRepository
from updoot.persistence.repository.vote import PostgresVoteRepository


class PostgresTransactionManager(TransactionManager):
    """Runs each transaction on its own session and connection.

    The connection goes back to the pool when the block exits, whether it
    committed or rolled back.

    Writes already made on the request session are committed before a
    transaction opens, so row locks they hold (e.g. from an earlier
    `updatePost` in the same document) cannot block it.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        request_session: AsyncSession,
    ) -> None:
        """Initialize transaction manager.

        Args:
            session_factory: Factory for creating database sessions
            request_session: The request's shared session
        """
        self.session_factory = session_factory
        self.request_session = request_session

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[TransactionScope]:
        """Open a transaction; commit on normal exit, roll back on error."""
        await self._commit_request_session()
        async with self.session_factory() as session:
            async with session.begin():
                yield TransactionScope(
                    posts=PostgresPostRepository(session),
                    votes=PostgresVoteRepository(session),
                )

    async def _commit_request_session(self) -> None:
        async with session_lock(self.request_session):
            if self.request_session.in_transaction():
                logfire.debug("Committing request session before transaction")
                await self.request_session.commit()
