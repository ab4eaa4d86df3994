"""Register use case."""

import logfire
from pydantic import BaseModel

from updoot.domain.error import UserAlreadyExistsError
from updoot.domain.service import JWTService, UserService

from .common import (
    MIN_USERNAME_LENGTH,
    AuthResponse,
    FieldError,
    UserItem,
    validate_password,
)


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    email: str
    password: str


class RegisterUseCase:
    """Use case for creating an account and starting a session."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    def validate(self, request: RegisterRequest) -> FieldError | None:
        """Check the registration form, first failure wins."""
        if "@" not in request.email:
            return FieldError(field="email", message="Invalid email")
        if len(request.username) < MIN_USERNAME_LENGTH:
            return FieldError(
                field="username",
                message=(
                    f"username must be atleast {MIN_USERNAME_LENGTH} characters long"
                ),
            )
        if "@" in request.username:
            return FieldError(
                field="username",
                message="username must include only alphanumeric characters",
            )
        return validate_password(request.password)

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute register flow.

        Args:
            request: Username, email and password

        Returns:
            The new user and a session token, or field errors
        """
        error = self.validate(request)
        if error:
            logfire.info("Registration rejected", field=error.field)
            return AuthResponse(errors=[error])

        try:
            user = await self.user_service.register(
                username=request.username,
                email=request.email,
                password=request.password,
            )
        except UserAlreadyExistsError as e:
            return AuthResponse.failure(e.field, str(e))

        token = self.jwt_service.create_token(user.id, user.username)
        return AuthResponse(user=UserItem.from_domain(user), token=token)
