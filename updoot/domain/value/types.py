"""Domain value objects for Updoot.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import NamedTuple

from pydantic import field_validator

from updoot.domain.value.common import RootValueObject
from updoot.domain.value.identifiers import PostId, UserId


class VoteDirection(int, Enum):
    """Direction of a vote, stored as its contribution to post points."""

    UP = 1
    DOWN = -1

    @classmethod
    def from_value(cls, value: int) -> "VoteDirection":
        """Map a requested vote value to a direction.

        Anything other than -1 counts as an upvote.
        """
        return cls.DOWN if value == -1 else cls.UP


class VoteKey(NamedTuple):
    """Composite key of a vote record: one per (user, post)."""

    user_id: UserId
    post_id: PostId


class Cursor(RootValueObject[int]):
    """Opaque feed pagination cursor.

    Wraps the created_at of the last post on the previous page as integer
    milliseconds since the epoch. The string form is what clients send back.
    """

    @field_validator("root")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Reject timestamps before the epoch."""
        if v < 0:
            raise ValueError("Cursor must be a non-negative timestamp")
        return v

    @classmethod
    def parse(cls, raw: str) -> "Cursor":
        """Parse the string a client sent back.

        Raises:
            ValueError: If the string is not an integer timestamp
        """
        try:
            millis = int(raw)
        except ValueError:
            raise ValueError(f"Invalid cursor: {raw!r}")
        return cls(millis)

    @classmethod
    def from_datetime(cls, moment: datetime) -> "Cursor":
        """Build the cursor for a post's created_at."""
        return cls(to_millis(moment))

    def to_datetime(self) -> datetime:
        """Timestamp boundary this cursor stands for (UTC).

        Raises:
            ValueError: If the timestamp is outside the datetime range
        """
        try:
            return datetime.fromtimestamp(self.root / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"Cursor out of range: {self.root}") from e


def to_millis(moment: datetime) -> int:
    """Milliseconds since the epoch; naive datetimes are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp() * 1000)
