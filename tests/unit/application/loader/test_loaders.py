"""Unit tests for the request-scoped batch loaders."""

import asyncio
from typing import Sequence

import pytest
from sqlalchemy.exc import OperationalError

from updoot.application.loader import Loaders, UpdootLoader, UserLoader
from updoot.domain.error import BatchFetchError
from updoot.domain.model import Vote
from updoot.domain.value import PostId, UserId, VoteDirection, VoteKey
from updoot.persistence.repository.inmemory import (
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from tests.di import build_test_container
from tests.factories import make_user


class CountingUserRepository(InMemoryUserRepository):
    """Records every bulk fetch."""

    def __init__(self) -> None:
        super().__init__()
        self.bulk_calls: list[list[UserId]] = []

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list:
        self.bulk_calls.append(list(user_ids))
        return await super().find_by_ids(user_ids)


class CountingVoteRepository(InMemoryVoteRepository):
    """Records every bulk fetch."""

    def __init__(self) -> None:
        super().__init__()
        self.bulk_calls: list[list[VoteKey]] = []

    async def find_by_keys(self, keys: Sequence[VoteKey]) -> list:
        self.bulk_calls.append(list(keys))
        return await super().find_by_keys(keys)


class BrokenUserRepository(InMemoryUserRepository):
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list:
        raise OperationalError("SELECT users", None, Exception("connection reset"))


class TestUserLoader:
    """Tests for UserLoader."""

    @pytest.mark.asyncio
    async def test_loads_in_one_span_are_batched_into_one_query(self):
        """Keys [5, 3, 5, 7] should hit the store once with {3, 5, 7}."""
        # Arrange
        repo = CountingUserRepository()
        for name in ("alice", "bobby", "carol", "danny", "erika"):
            await make_user(repo, name)  # IDs 1..5
        loader = UserLoader(repo)

        # Act
        results = await asyncio.gather(
            loader.load(UserId(5)),
            loader.load(UserId(3)),
            loader.load(UserId(5)),
            loader.load(UserId(7)),
        )

        # Assert
        assert len(repo.bulk_calls) == 1
        assert sorted(repo.bulk_calls[0]) == [3, 5, 7]
        assert len(results) == 4
        assert results[0].username == "erika"
        assert results[1].username == "carol"
        assert results[2] is results[0]
        assert results[3] is None

    @pytest.mark.asyncio
    async def test_results_follow_request_order_not_store_order(self):
        """Results should line up with the keys, whatever order the store uses."""
        repo = CountingUserRepository()
        for name in ("alice", "bobby", "carol"):
            await make_user(repo, name)
        loader = UserLoader(repo)

        results = await asyncio.gather(
            loader.load(UserId(3)), loader.load(UserId(1)), loader.load(UserId(2))
        )

        assert [u.id for u in results] == [3, 1, 2]

    @pytest.mark.asyncio
    async def test_loads_in_separate_spans_make_separate_batches(self):
        """A load issued after the first batch resolved starts a new batch."""
        repo = CountingUserRepository()
        await make_user(repo, "alice")
        await make_user(repo, "bobby")
        loader = UserLoader(repo)

        await loader.load(UserId(1))
        await loader.load(UserId(2))

        assert repo.bulk_calls == [[1], [2]]

    @pytest.mark.asyncio
    async def test_failed_bulk_fetch_fails_every_caller_the_same_way(self):
        """Every pending load of a failed batch should get the same error."""
        # Arrange
        loader = UserLoader(BrokenUserRepository())

        # Act
        results = await asyncio.gather(
            loader.load(UserId(1)),
            loader.load(UserId(2)),
            loader.load(UserId(3)),
            return_exceptions=True,
        )

        # Assert
        assert all(isinstance(r, BatchFetchError) for r in results)
        assert results[0] is results[1] is results[2]
        assert isinstance(results[0].__cause__, OperationalError)


class TestUpdootLoader:
    """Tests for UpdootLoader."""

    @pytest.mark.asyncio
    async def test_loads_votes_for_a_page_in_one_query(self):
        """Vote lookups for a page should become one bulk fetch."""
        # Arrange
        repo = CountingVoteRepository()
        user = UserId(1)
        await repo.save(Vote(user_id=user, post_id=PostId(10), value=VoteDirection.UP))
        await repo.save(
            Vote(user_id=user, post_id=PostId(30), value=VoteDirection.DOWN)
        )
        await repo.save(
            Vote(user_id=UserId(2), post_id=PostId(20), value=VoteDirection.UP)
        )
        loader = UpdootLoader(repo)

        # Act
        results = await asyncio.gather(
            *(loader.load(VoteKey(user, PostId(p))) for p in (10, 20, 30))
        )

        # Assert
        assert len(repo.bulk_calls) == 1
        assert results[0].value == VoteDirection.UP
        assert results[1] is None  # user 2's vote is not user 1's
        assert results[2].value == VoteDirection.DOWN


class TestLoadersPerRequest:
    """Tests for request scoping of loaders."""

    @pytest.mark.asyncio
    async def test_each_request_gets_fresh_loaders(self):
        """Two requests should never share loaders (or their caches)."""
        container = build_test_container()
        try:
            async with container() as first_request:
                first = await first_request.get(Loaders)
                again = await first_request.get(Loaders)
            async with container() as second_request:
                second = await second_request.get(Loaders)
        finally:
            await container.close()

        assert first is again
        assert first is not second
        assert first.users is not second.users
        assert first.updoots is not second.updoots
