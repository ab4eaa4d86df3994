"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from updoot.domain.model.post import Post
from updoot.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, post_id: PostId) -> Optional[Post]:
        """Find a post and lock its row until the transaction ends.

        Concurrent callers locking the same post wait for each other.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_page(
        self, limit: int, before: Optional[datetime] = None
    ) -> List[Post]:
        """Find newest posts first.

        Args:
            limit: Maximum number of posts to return
            before: Only posts created strictly before this moment

        Returns:
            Posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def create(self, title: str, text: str, creator_id: UserId) -> Post:
        """Insert a new post with zero points; the store assigns the ID.

        Args:
            title: Post title
            text: Post body
            creator_id: Author's user ID

        Returns:
            The created post
        """
        pass

    @abstractmethod
    async def update_content(
        self,
        post_id: PostId,
        creator_id: UserId,
        title: Optional[str] = None,
        text: Optional[str] = None,
    ) -> Optional[Post]:
        """Update title and/or text of a post owned by creator_id.

        Args:
            post_id: The post ID
            creator_id: Must match the post's creator
            title: New title (None keeps the current one)
            text: New text (None keeps the current one)

        Returns:
            Updated post, or None if no post matched id and creator
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId, creator_id: UserId) -> bool:
        """Delete a post owned by creator_id.

        Args:
            post_id: The post ID
            creator_id: Must match the post's creator

        Returns:
            True if a post was deleted
        """
        pass

    @abstractmethod
    async def adjust_points(self, post_id: PostId, delta: int) -> int:
        """Atomically add delta to the post's points.

        Uses a SQL-level increment so concurrent adjustments never overwrite
        each other.

        Args:
            post_id: The post ID
            delta: Signed change

        Returns:
            Points total after the change

        Raises:
            NotFoundError: If the post does not exist
        """
        pass
