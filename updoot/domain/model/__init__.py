"""Domain model entities for Updoot."""

from updoot.domain.model.post import Post
from updoot.domain.model.user import User
from updoot.domain.model.vote import Vote

__all__ = [
    "User",
    "Post",
    "Vote",
]
