"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .password_reset_service import MailClient, PasswordResetService
from .password_service import PasswordService
from .post_service import PostService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "JWTService",
    "MailClient",
    "PasswordResetService",
    "PasswordService",
    "PostService",
    "Service",
    "UserService",
    "VoteService",
]
