"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, insert, select, update

from updoot.domain.error import NotFoundError
from updoot.domain.model import Post
from updoot.domain.repository import PostRepository
from updoot.domain.value import PostId, UserId
from updoot.persistence.mappers import row_to_post
from updoot.persistence.repository.base import PostgresRepository
from updoot.persistence.tables import posts_table


class PostgresPostRepository(PostgresRepository, PostRepository):
    """PostgreSQL implementation of PostRepository."""

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_id_for_update(self, post_id: PostId) -> Optional[Post]:
        """Find a post with SELECT ... FOR UPDATE."""
        stmt = (
            select(posts_table).where(posts_table.c.id == post_id).with_for_update()
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_page(
        self, limit: int, before: Optional[datetime] = None
    ) -> List[Post]:
        """Find newest posts first, ties broken by ID."""
        with logfire.span("post_repository.find_page", limit=limit):
            stmt = select(posts_table).order_by(
                desc(posts_table.c.created_at), desc(posts_table.c.id)
            )
            if before is not None:
                stmt = stmt.where(posts_table.c.created_at < before)
            stmt = stmt.limit(limit)

            result = await self._execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def create(self, title: str, text: str, creator_id: UserId) -> Post:
        """Insert a new post with zero points."""
        stmt = (
            insert(posts_table)
            .values(title=title, text=text, creator_id=creator_id, points=0)
            .returning(posts_table)
        )
        result = await self._execute(stmt)
        return row_to_post(result.fetchone()._asdict())

    async def update_content(
        self,
        post_id: PostId,
        creator_id: UserId,
        title: Optional[str] = None,
        text: Optional[str] = None,
    ) -> Optional[Post]:
        """Update title and/or text where id and creator both match."""
        values: dict = {"updated_at": func.now()}
        if title is not None:
            values["title"] = title
        if text is not None:
            values["text"] = text

        stmt = (
            update(posts_table)
            .where(
                posts_table.c.id == post_id,
                posts_table.c.creator_id == creator_id,
            )
            .values(**values)
            .returning(posts_table)
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def delete(self, post_id: PostId, creator_id: UserId) -> bool:
        """Delete a post where id and creator both match."""
        stmt = delete(posts_table).where(
            posts_table.c.id == post_id,
            posts_table.c.creator_id == creator_id,
        )
        result = await self._execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def adjust_points(self, post_id: PostId, delta: int) -> int:
        """Add delta to points in SQL and return the new total."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(points=posts_table.c.points + delta)
            .returning(posts_table.c.points)
        )
        result = await self._execute(stmt)
        points = result.scalar_one_or_none()
        if points is None:
            raise NotFoundError("Post", str(post_id))
        return points
