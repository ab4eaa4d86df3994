"""Transaction boundary for operations spanning several repositories."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass

from updoot.domain.repository.post import PostRepository
from updoot.domain.repository.vote import VoteRepository


@dataclass(frozen=True)
class TransactionScope:
    """Repositories bound to one open transaction."""

    posts: PostRepository
    votes: VoteRepository


class TransactionManager(ABC):
    """Opens all-or-nothing transactions over posts and votes.

    Usage:
        async with transaction_manager.begin() as tx:
            post = await tx.posts.find_by_id_for_update(post_id)
            ...

    Leaving the block normally commits. An exception inside the block, or a
    failed commit, rolls everything back and propagates. Resources held by
    the transaction are released in both cases.
    """

    @abstractmethod
    def begin(self) -> AbstractAsyncContextManager[TransactionScope]:
        """Open a new transaction."""
        pass
