"""Auth use cases."""

from .change_password import ChangePasswordRequest, ChangePasswordUseCase
from .common import AuthResponse, FieldError, UserItem
from .forgot_password import ForgotPasswordRequest, ForgotPasswordUseCase
from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .login import LoginRequest, LoginUseCase
from .register import RegisterRequest, RegisterUseCase

__all__ = [
    "AuthResponse",
    "ChangePasswordRequest",
    "ChangePasswordUseCase",
    "FieldError",
    "ForgotPasswordRequest",
    "ForgotPasswordUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterUseCase",
    "UserItem",
]
