"""Per-request GraphQL context."""

from typing import Optional

from dishka import AsyncContainer
from fastapi import Request
from strawberry.fastapi import BaseContext

from updoot.application.loader import Loaders
from updoot.config import Settings
from updoot.domain.service import JWTService
from updoot.domain.value import UserId


class Context(BaseContext):
    """Everything a resolver needs for one request.

    Attributes:
        container: dishka request container, for resolving use cases
        loaders: This request's batch loaders
        user_id: Session user, None when not logged in
        settings: Application settings
    """

    def __init__(
        self,
        container: AsyncContainer,
        loaders: Loaders,
        settings: Settings,
        user_id: Optional[UserId] = None,
    ) -> None:
        super().__init__()
        self.container = container
        self.loaders = loaders
        self.settings = settings
        self.user_id = user_id

    def start_session(self, user_id: UserId, token: str) -> None:
        """Log the user in for this request and set the session cookie."""
        self.user_id = user_id
        if self.response is None:
            return

        auth = self.settings.auth
        self.response.set_cookie(
            key=auth.cookie_name,
            value=token,
            max_age=auth.cookie_max_age_days * 24 * 60 * 60,
            httponly=True,
            samesite="lax",
            secure=self.settings.is_production,
        )

    def end_session(self) -> None:
        """Log the user out and clear the session cookie."""
        self.user_id = None
        if self.response is not None:
            self.response.delete_cookie(self.settings.auth.cookie_name)


async def get_context(request: Request) -> Context:
    """Build the GraphQL context from the dishka request container.

    Used as the strawberry router's context_getter. Strawberry fills in
    `request` and `response` afterwards.
    """
    container: AsyncContainer = request.state.dishka_container
    settings = await container.get(Settings)
    jwt_service = await container.get(JWTService)

    token = request.cookies.get(settings.auth.cookie_name)
    return Context(
        container=container,
        loaders=await container.get(Loaders),
        settings=settings,
        user_id=jwt_service.get_user_id_from_token(token),
    )
