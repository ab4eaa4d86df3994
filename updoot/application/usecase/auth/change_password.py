"""Change password use case."""

from pydantic import BaseModel

from updoot.domain.error import InvalidCredentialsError
from updoot.domain.service import JWTService, PasswordResetService

from .common import AuthResponse, UserItem, validate_password


class ChangePasswordRequest(BaseModel):
    """Change password request (from a reset link)."""

    token: str
    new_password: str


class ChangePasswordUseCase:
    """Use case for setting a new password with a reset token."""

    def __init__(
        self,
        password_reset_service: PasswordResetService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize change password use case.

        Args:
            password_reset_service: Password reset domain service
            jwt_service: JWT token domain service
        """
        self.password_reset_service = password_reset_service
        self.jwt_service = jwt_service

    async def execute(self, request: ChangePasswordRequest) -> AuthResponse:
        """Execute change password flow.

        A successful change consumes the token and logs the user in.

        Returns:
            The user and a session token, or field errors
        """
        error = validate_password(request.new_password, field="newPassword")
        if error:
            return AuthResponse(errors=[error])

        try:
            user = await self.password_reset_service.reset_password(
                request.token, request.new_password
            )
        except InvalidCredentialsError as e:
            return AuthResponse.failure(e.field, str(e))

        token = self.jwt_service.create_token(user.id, user.username)
        return AuthResponse(user=UserItem.from_domain(user), token=token)
