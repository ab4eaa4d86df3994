"""Forgot password use case."""

from pydantic import BaseModel

from updoot.domain.service import PasswordResetService


class ForgotPasswordRequest(BaseModel):
    """Forgot password request."""

    email: str


class ForgotPasswordUseCase:
    """Use case for emailing a password reset link."""

    def __init__(self, password_reset_service: PasswordResetService) -> None:
        """Initialize forgot password use case.

        Args:
            password_reset_service: Password reset domain service
        """
        self.password_reset_service = password_reset_service

    async def execute(self, request: ForgotPasswordRequest) -> bool:
        """Execute forgot password flow.

        Returns:
            True if a reset email was sent

        Raises:
            MailError: If the email could not be delivered
        """
        if "@" not in request.email:
            return False
        return await self.password_reset_service.request_reset(request.email)
