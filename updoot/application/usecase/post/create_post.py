"""Create post use case."""

from pydantic import BaseModel, Field

from updoot.config import Settings
from updoot.domain.error import NotAuthenticatedError
from updoot.domain.service import PostService
from updoot.domain.value import UserId

from .common import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str = Field(min_length=1, max_length=300)
    text: str = Field(max_length=10000)
    user_id: int | None = None  # Session user (None if unauthenticated)


class CreatePostUseCase:
    """Use case for creating a post."""

    def __init__(self, post_service: PostService, settings: Settings) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            settings: Application settings
        """
        self.post_service = post_service
        self.settings = settings

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        Args:
            request: Title, text and session user

        Returns:
            The created post, with zero points

        Raises:
            NotAuthenticatedError: If there is no session user
        """
        if request.user_id is None:
            raise NotAuthenticatedError()

        post = await self.post_service.create_post(
            title=request.title,
            text=request.text,
            creator_id=UserId(request.user_id),
        )
        return PostItem.from_domain(post, self.settings.feed.snippet_length)
