"""Shared response shapes for post use cases."""

from datetime import datetime

from pydantic import BaseModel

from updoot.domain.model.post import Post


class PostItem(BaseModel):
    """A post as returned to the interface layer.

    `creator` and `voteStatus` are not included; the interface resolves them
    lazily through the request's batch loaders.
    """

    id: int
    title: str
    text: str
    text_snippet: str
    points: int
    creator_id: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, post: Post, snippet_length: int) -> "PostItem":
        return cls(
            id=post.id,
            title=post.title,
            text=post.text,
            text_snippet=post.snippet(snippet_length),
            points=post.points,
            creator_id=post.creator_id,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
