"""In-memory post repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from updoot.domain.error import NotFoundError
from updoot.domain.model.post import Post
from updoot.domain.repository.post import PostRepository
from updoot.domain.value import PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Row locks are not modelled here; InMemoryTransactionManager serializes
    whole transactions instead.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._next_id = 1

    def add(self, post: Post) -> Post:
        """Store a fully-formed post, e.g. with a fixed created_at."""
        self._posts[post.id] = post
        self._next_id = max(self._next_id, post.id + 1)
        return post

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_id_for_update(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_page(
        self, limit: int, before: Optional[datetime] = None
    ) -> list[Post]:
        """Find newest posts first, ties broken by ID."""
        posts = [
            p for p in self._posts.values() if before is None or p.created_at < before
        ]
        posts.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        return posts[:limit]

    async def create(self, title: str, text: str, creator_id: UserId) -> Post:
        """Insert a new post with zero points."""
        now = datetime.now(timezone.utc)
        post = Post(
            id=PostId(self._next_id),
            title=title,
            text=text,
            points=0,
            creator_id=creator_id,
            created_at=now,
            updated_at=now,
        )
        return self.add(post)

    async def update_content(
        self,
        post_id: PostId,
        creator_id: UserId,
        title: Optional[str] = None,
        text: Optional[str] = None,
    ) -> Optional[Post]:
        """Update title and/or text where id and creator both match."""
        post = self._posts.get(post_id)
        if post is None or post.creator_id != creator_id:
            return None

        changes: dict = {"updated_at": datetime.now(timezone.utc)}
        if title is not None:
            changes["title"] = title
        if text is not None:
            changes["text"] = text
        updated = post.model_copy(update=changes)
        self._posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId, creator_id: UserId) -> bool:
        """Delete a post where id and creator both match."""
        post = self._posts.get(post_id)
        if post is None or post.creator_id != creator_id:
            return False
        del self._posts[post_id]
        return True

    async def adjust_points(self, post_id: PostId, delta: int) -> int:
        """Add delta to the post's points."""
        post = self._posts.get(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        updated = post.model_copy(update={"points": post.points + delta})
        self._posts[post_id] = updated
        return updated.points
