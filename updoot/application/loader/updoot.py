"""Updoot (vote) batch loader.

Resolving `Post.voteStatus` for the session user across a feed page would
otherwise cost one query per post.
"""

from typing import Optional

import logfire
from sqlalchemy.exc import SQLAlchemyError
from strawberry.dataloader import DataLoader

from updoot.domain.error import BatchFetchError
from updoot.domain.model.vote import Vote
from updoot.domain.repository import VoteRepository
from updoot.domain.value import VoteKey

from .base import order_by_keys


class UpdootLoader(DataLoader[VoteKey, Optional[Vote]]):
    """Loads votes by (user_id, post_id), one bulk query per batch."""

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize updoot loader.

        Args:
            vote_repository: Vote repository
        """
        super().__init__(load_fn=self.batch_load)
        self.vote_repository = vote_repository

    async def batch_load(self, keys: list[VoteKey]) -> list[Optional[Vote]]:
        """Fetch every vote in the batch with a single query.

        Raises:
            BatchFetchError: If the query failed; every caller in the
                batch receives this error
        """
        with logfire.span("updoot_loader.batch_load", key_count=len(keys)):
            try:
                votes = await self.vote_repository.find_by_keys(keys)
            except SQLAlchemyError as e:
                logfire.error(
                    "Updoot batch fetch failed", key_count=len(keys), error=str(e)
                )
                raise BatchFetchError("UpdootLoader", len(keys), str(e)) from e

            return order_by_keys(keys, votes, key_of=lambda vote: vote.key)
