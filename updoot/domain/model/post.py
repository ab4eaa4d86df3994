"""Post aggregate root."""

from datetime import datetime

from pydantic import Field

from updoot.domain.model.common import DomainModel
from updoot.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    `points` is a denormalized running sum of the values of every vote
    currently recorded for the post. Only the vote service changes it.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    text: str = Field(max_length=10000)
    points: int = 0
    creator_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def snippet(self, length: int) -> str:
        """Leading slice of the text, for feed listings."""
        return self.text[:length]
