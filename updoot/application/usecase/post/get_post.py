"""Get post use case."""

from pydantic import BaseModel

from updoot.config import Settings
from updoot.domain.service import PostService
from updoot.domain.value import PostId

from .common import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int


class GetPostUseCase:
    """Use case for retrieving a single post."""

    def __init__(self, post_service: PostService, settings: Settings) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            settings: Application settings
        """
        self.post_service = post_service
        self.settings = settings

    async def execute(self, request: GetPostRequest) -> PostItem | None:
        """Execute get post flow.

        Returns:
            Post if found, None otherwise
        """
        post = await self.post_service.get_post_by_id(PostId(request.post_id))
        if not post:
            return None
        return PostItem.from_domain(post, self.settings.feed.snippet_length)
