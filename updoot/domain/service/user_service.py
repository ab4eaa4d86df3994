"""User domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from updoot.domain.error import (
    InvalidCredentialsError,
    NotFoundError,
    UserAlreadyExistsError,
)
from updoot.domain.model import User
from updoot.domain.repository import UserRepository
from updoot.domain.value import UserId

from .base import Service
from .password_service import PasswordService


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_service: Password hashing service
        """
        self.user_repository = user_repository
        self.password_service = password_service

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", str(user_id))
            return user

    async def register(self, username: str, email: str, password: str) -> User:
        """Create a user account.

        Args:
            username: Desired username
            email: Email address
            password: Plain-text password (validated by the caller)

        Returns:
            Created user

        Raises:
            UserAlreadyExistsError: If the username or email is taken
        """
        with logfire.span("user_service.register", username=username):
            if await self.user_repository.find_by_email(email):
                raise UserAlreadyExistsError("email")
            if await self.user_repository.find_by_username(username):
                raise UserAlreadyExistsError("username")

            password_hash = await self.password_service.hash(password)
            try:
                user = await self.user_repository.create(
                    username=username, email=email, password_hash=password_hash
                )
            except IntegrityError as e:
                # Lost a race with a concurrent registration
                detail = str(e.orig)
                field = "email" if "email" in detail else "username"
                logfire.warn("Duplicate registration", username=username, field=field)
                raise UserAlreadyExistsError(field) from e

            logfire.info("User registered", user_id=user.id, username=username)
            return user

    async def authenticate(self, username_or_email: str, password: str) -> User:
        """Check login credentials.

        Identifiers containing "@" are treated as emails, anything else as a
        username.

        Args:
            username_or_email: Username or email
            password: Plain-text password

        Returns:
            The authenticated user

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong
        """
        with logfire.span("user_service.authenticate"):
            if "@" in username_or_email:
                user = await self.user_repository.find_by_email(username_or_email)
            else:
                user = await self.user_repository.find_by_username(username_or_email)

            if user is None:
                logfire.info("Login with unknown user")
                raise InvalidCredentialsError(
                    "usernameOrEmail", "Incorrect username or email"
                )

            if not await self.password_service.verify(password, user.password_hash):
                logfire.info("Login with wrong password", user_id=user.id)
                raise InvalidCredentialsError("password", "Incorrect password")

            logfire.info("User authenticated", user_id=user.id)
            return user

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email.

        Args:
            email: Email address

        Returns:
            User if found, None otherwise
        """
        return await self.user_repository.find_by_email(email)

    async def change_password(self, user_id: UserId, new_password: str) -> User:
        """Set a new password for a user.

        Args:
            user_id: User ID
            new_password: Plain-text password (validated by the caller)

        Returns:
            The user

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.change_password", user_id=user_id):
            user = await self.get_by_id(user_id)
            await self.user_repository.update_password(
                user_id, await self.password_service.hash(new_password)
            )
            logfire.info("Password changed", user_id=user_id)
            return user
