"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from updoot.domain.model.vote import Vote
from updoot.domain.repository.vote import VoteRepository
from updoot.domain.value import PostId, VoteDirection, VoteKey


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[VoteKey, Vote] = {}

    async def find(self, key: VoteKey) -> Optional[Vote]:
        """Find a user's vote on a post."""
        return self._votes.get(key)

    async def find_by_keys(self, keys: Sequence[VoteKey]) -> list[Vote]:
        """Find votes for many pairs; storage order, missing pairs skipped."""
        wanted = set(keys)
        return [vote for key, vote in self._votes.items() if key in wanted]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        if vote.key in self._votes:
            raise IntegrityError("Duplicate vote", None, Exception())
        self._votes[vote.key] = vote
        return vote

    async def update_value(self, key: VoteKey, value: VoteDirection) -> None:
        """Change the direction of an existing vote."""
        vote = self._votes.get(key)
        if vote:
            self._votes[key] = vote.model_copy(update={"value": value})

    async def delete(self, key: VoteKey) -> bool:
        """Delete a vote."""
        return self._votes.pop(key, None) is not None

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every vote on a post."""
        keys = [key for key in self._votes if key.post_id == post_id]
        for key in keys:
            del self._votes[key]
        return len(keys)

    async def sum_by_post(self, post_id: PostId) -> int:
        """Sum of vote values on a post."""
        return sum(
            vote.value.value for key, vote in self._votes.items() if key.post_id == post_id
        )
