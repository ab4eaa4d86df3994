"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from updoot.domain.model import Post, User, Vote
from updoot.domain.value import PostId, UserId, VoteDirection


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=row["username"],
        email=row["email"],
        password_hash=row["password"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        text=row["text"],
        points=row["points"],
        creator_id=UserId(row["creator_id"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        user_id=UserId(row["user_id"]),
        post_id=PostId(row["post_id"]),
        value=VoteDirection(row["value"]),
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "user_id": vote.user_id,
        "post_id": vote.post_id,
        "value": vote.value.value,
    }
