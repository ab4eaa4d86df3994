"""Post domain service."""

import logfire

from updoot.domain.error import NotAuthorizedError, NotFoundError
from updoot.domain.model.post import Post
from updoot.domain.repository import PostRepository, TransactionManager
from updoot.domain.value import PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            transaction_manager: Used where votes and posts change together
        """
        self.post_repository = post_repository
        self.transaction_manager = transaction_manager

    async def create_post(self, title: str, text: str, creator_id: UserId) -> Post:
        """Create a post with zero points.

        Args:
            title: Post title
            text: Post body
            creator_id: Author's user ID

        Returns:
            Created post
        """
        with logfire.span("post_service.create_post", creator_id=creator_id):
            post = await self.post_repository.create(
                title=title, text=text, creator_id=creator_id
            )
            logfire.info("Post created", post_id=post.id, creator_id=creator_id)
            return post

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=post_id, title=post.title)
            else:
                logfire.warn("Post not found", post_id=post_id)

            return post

    async def update_post(
        self,
        post_id: PostId,
        user_id: UserId,
        title: str | None = None,
        text: str | None = None,
    ) -> Post:
        """Update a post's title and/or text.

        Args:
            post_id: Post ID
            user_id: Editing user's ID, must be the creator
            title: New title (None keeps the current one)
            text: New text (None keeps the current one)

        Returns:
            Updated post

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the user did not create the post
        """
        with logfire.span("post_service.update_post", post_id=post_id, user_id=user_id):
            updated = await self.post_repository.update_content(
                post_id, user_id, title=title, text=text
            )
            if updated:
                logfire.info("Post updated", post_id=post_id)
                return updated

            # Nothing matched (id, creator): find out which part was wrong
            if await self.post_repository.find_by_id(post_id) is None:
                raise NotFoundError("Post", str(post_id))
            logfire.warn("Post update by non-creator", post_id=post_id, user_id=user_id)
            raise NotAuthorizedError("post", post_id, user_id)

    async def delete_post(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a post and its votes.

        Args:
            post_id: Post ID
            user_id: Deleting user's ID, must be the creator

        Returns:
            True if the post was deleted, False if there was no post owned
            by the user with that ID
        """
        with logfire.span("post_service.delete_post", post_id=post_id, user_id=user_id):
            async with self.transaction_manager.begin() as tx:
                post = await tx.posts.find_by_id_for_update(post_id)
                if post is None or post.creator_id != user_id:
                    logfire.warn(
                        "Post delete rejected",
                        post_id=post_id,
                        user_id=user_id,
                        exists=post is not None,
                    )
                    return False

                removed_votes = await tx.votes.delete_by_post(post_id)
                deleted = await tx.posts.delete(post_id, user_id)

            logfire.info(
                "Post deleted", post_id=post_id, removed_votes=removed_votes
            )
            return deleted
