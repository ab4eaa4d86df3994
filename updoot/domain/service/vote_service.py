"""Vote domain service.

Applies one user's vote intent to a post. The vote record and the post's
points counter change together inside a single transaction, so
`post.points` always equals the sum of the post's recorded vote values.

For an existing vote with value `old` and a requested direction `new`:

    no vote        -> insert new           points += new
    old == new     -> delete (retract)     points -= new
    old == -new    -> flip to new          points += 2 * new
"""

import logfire
from sqlalchemy.exc import SQLAlchemyError

from updoot.domain.error import NotFoundError, VoteConflictError
from updoot.domain.model.vote import Vote
from updoot.domain.repository import TransactionManager
from updoot.domain.value import PostId, UserId, VoteDirection, VoteKey

from .base import Service


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(self, transaction_manager: TransactionManager) -> None:
        """Initialize vote service.

        Args:
            transaction_manager: Opens transactions over posts and votes
        """
        self.transaction_manager = transaction_manager

    async def vote(
        self, user_id: UserId, post_id: PostId, direction: VoteDirection
    ) -> int:
        """Cast, flip or retract a vote.

        Args:
            user_id: Voting user's ID
            post_id: Post ID
            direction: Requested direction

        Returns:
            The post's points total after commit

        Raises:
            NotFoundError: If the post does not exist (nothing is written)
            VoteConflictError: If the transaction failed and was rolled back
        """
        with logfire.span(
            "vote_service.vote",
            post_id=post_id,
            user_id=user_id,
            direction=direction.name,
        ):
            try:
                async with self.transaction_manager.begin() as tx:
                    # The row lock serializes concurrent voters on this post
                    post = await tx.posts.find_by_id_for_update(post_id)
                    if post is None:
                        logfire.warn("Vote on non-existent post", post_id=post_id)
                        raise NotFoundError("Post", str(post_id))

                    key = VoteKey(user_id, post_id)
                    existing = await tx.votes.find(key)

                    if existing is None:
                        await tx.votes.save(
                            Vote(user_id=user_id, post_id=post_id, value=direction)
                        )
                        delta = direction.value
                        outcome = "cast"
                    elif existing.value == direction:
                        await tx.votes.delete(key)
                        delta = -direction.value
                        outcome = "retracted"
                    else:
                        await tx.votes.update_value(key, direction)
                        delta = 2 * direction.value
                        outcome = "flipped"

                    points = await tx.posts.adjust_points(post_id, delta)
            except SQLAlchemyError as e:
                logfire.error(
                    "Vote transaction rolled back",
                    post_id=post_id,
                    user_id=user_id,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise VoteConflictError(post_id, user_id, type(e).__name__) from e

            logfire.info(
                "Vote recorded",
                post_id=post_id,
                user_id=user_id,
                outcome=outcome,
                delta=delta,
                points=points,
            )
            return points
