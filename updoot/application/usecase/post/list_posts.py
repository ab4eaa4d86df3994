"""List posts use case (the feed)."""

import logfire
from pydantic import BaseModel

from updoot.config import Settings
from updoot.domain.error import ValidationError
from updoot.domain.repository import PostRepository
from updoot.domain.value import Cursor

from .common import PostItem


class ListPostsRequest(BaseModel):
    """List posts request."""

    limit: int
    cursor: str | None = None  # createdAt of the last post already seen


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    has_more: bool


class ListPostsUseCase:
    """Use case for paging through posts, newest first."""

    def __init__(self, post_repository: PostRepository, settings: Settings) -> None:
        """Initialize list posts use case.

        Args:
            post_repository: Post repository
            settings: Application settings (page size cap, snippet length)
        """
        self.post_repository = post_repository
        self.settings = settings

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        One extra row is fetched to learn whether another page exists
        without a separate count query.

        Args:
            request: Page size and optional cursor

        Returns:
            At most `limit` posts and whether more remain

        Raises:
            ValidationError: If the cursor is malformed
        """
        limit = max(1, min(request.limit, self.settings.feed.max_limit))

        before = None
        if request.cursor:
            try:
                before = Cursor.parse(request.cursor).to_datetime()
            except ValueError as e:
                raise ValidationError(str(e)) from e

        with logfire.span(
            "list_posts.execute", limit=limit, cursor=request.cursor
        ):
            rows = await self.post_repository.find_page(limit=limit + 1, before=before)

            snippet_length = self.settings.feed.snippet_length
            posts = [PostItem.from_domain(p, snippet_length) for p in rows[:limit]]
            has_more = len(rows) == limit + 1

            logfire.info("Posts listed", count=len(posts), has_more=has_more)

            return ListPostsResponse(posts=posts, has_more=has_more)
