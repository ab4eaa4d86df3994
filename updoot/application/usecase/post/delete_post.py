"""Delete post use case."""

from pydantic import BaseModel

from updoot.domain.error import NotAuthenticatedError
from updoot.domain.service import PostService
from updoot.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: int
    user_id: int | None = None  # Session user, must be the creator


class DeletePostUseCase:
    """Use case for deleting a post together with its votes."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> bool:
        """Execute delete post flow.

        Returns:
            True if the post was deleted

        Raises:
            NotAuthenticatedError: If there is no session user
        """
        if request.user_id is None:
            raise NotAuthenticatedError()

        return await self.post_service.delete_post(
            PostId(request.post_id), UserId(request.user_id)
        )
