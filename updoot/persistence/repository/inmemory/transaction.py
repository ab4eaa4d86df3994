"""In-memory transaction manager for testing."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from updoot.domain.repository import TransactionManager, TransactionScope

from .post import InMemoryPostRepository
from .vote import InMemoryVoteRepository


class InMemoryTransactionManager(TransactionManager):
    """Serializes transactions over shared in-memory repositories.

    One lock stands in for the database's row locks. A snapshot taken on
    begin is restored if the block raises or the commit fails.
    """

    def __init__(
        self, posts: InMemoryPostRepository, votes: InMemoryVoteRepository
    ) -> None:
        self.posts = posts
        self.votes = votes
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[TransactionScope]:
        """Open a transaction; commit on normal exit, roll back on error."""
        async with self._lock:
            posts_snapshot = dict(self.posts._posts)
            votes_snapshot = dict(self.votes._votes)
            try:
                yield TransactionScope(posts=self.posts, votes=self.votes)
                await self.commit()
            except BaseException:
                self.posts._posts = posts_snapshot
                self.votes._votes = votes_snapshot
                raise

    async def commit(self) -> None:
        """Make the transaction durable (nothing to do in memory)."""
        pass
