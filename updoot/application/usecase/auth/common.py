"""Shared shapes for auth use cases.

Form-style failures are returned as a list of field errors instead of being
raised, so the client can show them next to the offending input.
"""

from datetime import datetime

from pydantic import BaseModel

from updoot.domain.model.user import User

MIN_USERNAME_LENGTH = 4
MIN_PASSWORD_LENGTH = 8


class FieldError(BaseModel):
    """A validation failure tied to one input field."""

    field: str
    message: str


class UserItem(BaseModel):
    """Public view of a user (no password hash)."""

    id: int
    username: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserItem":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthResponse(BaseModel):
    """Result of a form-style auth mutation.

    Exactly one of `errors` or `user` is set. `token` is the session token
    to put in the cookie when `user` is set.
    """

    errors: list[FieldError] | None = None
    user: UserItem | None = None
    token: str | None = None

    @classmethod
    def failure(cls, field: str, message: str) -> "AuthResponse":
        return cls(errors=[FieldError(field=field, message=message)])


def validate_password(password: str, field: str = "password") -> FieldError | None:
    if len(password) < MIN_PASSWORD_LENGTH:
        return FieldError(
            field=field,
            message=f"password must be atleast {MIN_PASSWORD_LENGTH} characters long",
        )
    return None
