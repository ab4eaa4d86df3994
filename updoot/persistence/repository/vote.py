"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import and_, delete, func, insert, select, tuple_, update

from updoot.domain.model import Vote
from updoot.domain.repository import VoteRepository
from updoot.domain.value import PostId, VoteDirection, VoteKey
from updoot.persistence.mappers import row_to_vote, vote_to_dict
from updoot.persistence.repository.base import PostgresRepository
from updoot.persistence.tables import votes_table


def _matches(key: VoteKey):
    return and_(
        votes_table.c.user_id == key.user_id,
        votes_table.c.post_id == key.post_id,
    )


class PostgresVoteRepository(PostgresRepository, VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    async def find(self, key: VoteKey) -> Optional[Vote]:
        """Find a user's vote on a post."""
        stmt = select(votes_table).where(_matches(key))
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_keys(self, keys: Sequence[VoteKey]) -> List[Vote]:
        """Find votes for many (user, post) pairs (batch query)."""
        if not keys:
            return []

        with logfire.span("vote_repository.find_by_keys", count=len(keys)):
            stmt = select(votes_table).where(
                tuple_(votes_table.c.user_id, votes_table.c.post_id).in_(
                    [(key.user_id, key.post_id) for key in keys]
                )
            )
            result = await self._execute(stmt)
            return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self._execute(stmt)
        return vote

    async def update_value(self, key: VoteKey, value: VoteDirection) -> None:
        """Change the direction of an existing vote."""
        stmt = update(votes_table).where(_matches(key)).values(value=value.value)
        await self._execute(stmt)

    async def delete(self, key: VoteKey) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(_matches(key))
        result = await self._execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every vote on a post."""
        stmt = delete(votes_table).where(votes_table.c.post_id == post_id)
        result = await self._execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]

    async def sum_by_post(self, post_id: PostId) -> int:
        """Sum of vote values on a post."""
        stmt = select(func.coalesce(func.sum(votes_table.c.value), 0)).where(
            votes_table.c.post_id == post_id
        )
        result = await self._execute(stmt)
        return int(result.scalar_one())
