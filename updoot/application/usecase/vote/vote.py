"""Vote use case."""

import logfire
from pydantic import BaseModel

from updoot.domain.error import NotAuthenticatedError, NotFoundError
from updoot.domain.service import VoteService
from updoot.domain.value import PostId, UserId, VoteDirection


class VoteRequest(BaseModel):
    """Vote request."""

    post_id: int
    value: int  # -1 votes down, anything else votes up
    user_id: int | None = None  # Session user (None if unauthenticated)


class VoteResponse(BaseModel):
    """Vote response."""

    post_id: int
    points: int


class VoteUseCase:
    """Use case for casting, flipping or retracting a vote on a post."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VoteRequest) -> VoteResponse | None:
        """Execute vote flow.

        Args:
            request: Vote request

        Returns:
            New points total, or None if the post does not exist

        Raises:
            NotAuthenticatedError: If there is no session user
            VoteConflictError: If the vote transaction was rolled back
        """
        if request.user_id is None:
            logfire.info("Vote rejected, not authenticated", post_id=request.post_id)
            raise NotAuthenticatedError()

        try:
            points = await self.vote_service.vote(
                user_id=UserId(request.user_id),
                post_id=PostId(request.post_id),
                direction=VoteDirection.from_value(request.value),
            )
        except NotFoundError:
            return None

        return VoteResponse(post_id=request.post_id, points=points)
