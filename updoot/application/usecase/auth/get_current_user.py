"""Get current user use case."""

from pydantic import BaseModel

from updoot.domain.error import NotFoundError
from updoot.domain.service import UserService
from updoot.domain.value import UserId

from .common import UserItem


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: int | None = None  # Session user (None if unauthenticated)


class GetCurrentUserUseCase:
    """Use case for getting the session's user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserItem | None:
        """Execute get current user flow.

        Returns:
            The user, or None without a session or if the user is gone
        """
        if request.user_id is None:
            return None

        try:
            user = await self.user_service.get_by_id(UserId(request.user_id))
        except NotFoundError:
            return None
        return UserItem.from_domain(user)
