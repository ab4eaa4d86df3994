"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from updoot.domain.model.vote import Vote
from updoot.domain.value import PostId, VoteDirection, VoteKey


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find(self, key: VoteKey) -> Optional[Vote]:
        """Find a user's vote on a post.

        Args:
            key: (user_id, post_id)

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_keys(self, keys: Sequence[VoteKey]) -> List[Vote]:
        """Find votes for many (user, post) pairs (batch query).

        Order of the result is unspecified and missing pairs are skipped.

        Args:
            keys: Distinct (user_id, post_id) pairs

        Returns:
            Votes that exist, in storage order
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If a vote already exists for this user/post
        """
        pass

    @abstractmethod
    async def update_value(self, key: VoteKey, value: VoteDirection) -> None:
        """Change the direction of an existing vote.

        Args:
            key: (user_id, post_id)
            value: New direction
        """
        pass

    @abstractmethod
    async def delete(self, key: VoteKey) -> bool:
        """Delete a vote.

        Args:
            key: (user_id, post_id)

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every vote on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def sum_by_post(self, post_id: PostId) -> int:
        """Sum of vote values on a post (0 when there are none).

        Not used by the vote service, which keeps `points` in step itself.
        This is the audit query for that invariant (tests and operators
        compare it with the post's `points`).

        Args:
            post_id: The post ID

        Returns:
            The value the post's points counter must equal
        """
        pass
