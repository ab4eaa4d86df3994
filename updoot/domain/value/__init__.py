"""Domain value objects for Updoot."""

from updoot.domain.value.identifiers import PostId, UserId
from updoot.domain.value.types import Cursor, VoteDirection, VoteKey, to_millis

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    # Types
    "Cursor",
    "VoteDirection",
    "VoteKey",
    "to_millis",
]
