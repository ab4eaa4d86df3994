"""User aggregate root.

Users register with a username, email and password, and own the posts
they create.
"""

from datetime import datetime

from pydantic import Field

from updoot.domain.model.common import DomainModel
from updoot.domain.value import UserId


class User(DomainModel):
    """User aggregate root.

    The password hash never leaves the domain and persistence layers.
    """

    id: UserId
    username: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
