"""Login use case."""

from pydantic import BaseModel

from updoot.domain.error import InvalidCredentialsError
from updoot.domain.service import JWTService, UserService

from .common import AuthResponse, UserItem


class LoginRequest(BaseModel):
    """Login request."""

    username_or_email: str
    password: str


class LoginUseCase:
    """Use case for username/email + password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Args:
            request: Credentials

        Returns:
            The user and a session token, or a field error naming the
            wrong input
        """
        try:
            user = await self.user_service.authenticate(
                request.username_or_email, request.password
            )
        except InvalidCredentialsError as e:
            return AuthResponse.failure(e.field, str(e))

        token = self.jwt_service.create_token(user.id, user.username)
        return AuthResponse(user=UserItem.from_domain(user), token=token)
