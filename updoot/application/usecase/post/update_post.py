"""Update post use case."""

import logfire
from pydantic import BaseModel, Field

from updoot.config import Settings
from updoot.domain.error import NotAuthenticatedError, NotAuthorizedError, NotFoundError
from updoot.domain.service import PostService
from updoot.domain.value import PostId, UserId

from .common import PostItem


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: int
    title: str | None = Field(default=None, min_length=1, max_length=300)
    text: str | None = Field(default=None, max_length=10000)
    user_id: int | None = None  # Session user, must be the creator


class UpdatePostUseCase:
    """Use case for editing a post."""

    def __init__(self, post_service: PostService, settings: Settings) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            settings: Application settings
        """
        self.post_service = post_service
        self.settings = settings

    async def execute(self, request: UpdatePostRequest) -> PostItem | None:
        """Execute update post flow.

        Args:
            request: Post ID, new title and/or text, session user

        Returns:
            Updated post, or None if the post is missing or not the user's

        Raises:
            NotAuthenticatedError: If there is no session user
        """
        if request.user_id is None:
            raise NotAuthenticatedError()

        try:
            post = await self.post_service.update_post(
                PostId(request.post_id),
                UserId(request.user_id),
                title=request.title,
                text=request.text,
            )
        except (NotFoundError, NotAuthorizedError) as e:
            logfire.info("Post not updated", post_id=request.post_id, reason=str(e))
            return None

        return PostItem.from_domain(post, self.settings.feed.snippet_length)
