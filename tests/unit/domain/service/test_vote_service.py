"""Unit tests for VoteService."""

import asyncio

import pytest
from sqlalchemy.exc import OperationalError

from updoot.domain.error import NotFoundError, VoteConflictError
from updoot.domain.repository import PostRepository, VoteRepository
from updoot.domain.service import VoteService
from updoot.domain.value import PostId, UserId, VoteDirection, VoteKey
from updoot.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryTransactionManager,
    InMemoryVoteRepository,
)
from tests.factories import make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

UP = VoteDirection.UP
DOWN = VoteDirection.DOWN


async def _setup(unit_env, post_id: int = 1):
    vote_service = await unit_env.get(VoteService)
    post_repo = await unit_env.get(InMemoryPostRepository)
    vote_repo = await unit_env.get(InMemoryVoteRepository)
    make_post(post_repo, post_id=post_id, creator_id=100)
    return vote_service, post_repo, vote_repo


async def _points(post_repo: PostRepository, post_id: int) -> int:
    post = await post_repo.find_by_id(PostId(post_id))
    return post.points


class TestVoteCases:
    """Tests for the three vote transitions."""

    @pytest.mark.asyncio
    async def test_first_upvote_records_vote_and_adds_one(self, unit_env):
        """A first upvote should insert a +1 vote and raise points by 1."""
        # Arrange
        vote_service, post_repo, vote_repo = await _setup(unit_env)

        # Act
        points = await vote_service.vote(UserId(1), PostId(1), UP)

        # Assert
        assert points == 1
        assert await _points(post_repo, 1) == 1
        vote = await vote_repo.find(VoteKey(UserId(1), PostId(1)))
        assert vote is not None
        assert vote.value == UP

    @pytest.mark.asyncio
    async def test_first_downvote_subtracts_one(self, unit_env):
        """A first downvote should insert a -1 vote and lower points by 1."""
        vote_service, post_repo, _ = await _setup(unit_env)

        points = await vote_service.vote(UserId(1), PostId(1), DOWN)

        assert points == -1
        assert await _points(post_repo, 1) == -1

    @pytest.mark.asyncio
    async def test_same_direction_twice_retracts_vote(self, unit_env):
        """Repeating a vote should remove it and restore the points."""
        # Arrange
        vote_service, post_repo, vote_repo = await _setup(unit_env)
        await vote_service.vote(UserId(1), PostId(1), UP)

        # Act
        points = await vote_service.vote(UserId(1), PostId(1), UP)

        # Assert
        assert points == 0
        assert await vote_repo.find(VoteKey(UserId(1), PostId(1))) is None

    @pytest.mark.asyncio
    async def test_opposite_direction_flips_vote_by_two(self, unit_env):
        """Voting the other way should flip the stored vote and move points by 2."""
        # Arrange
        vote_service, post_repo, vote_repo = await _setup(unit_env)
        await vote_service.vote(UserId(1), PostId(1), UP)

        # Act
        points = await vote_service.vote(UserId(1), PostId(1), DOWN)

        # Assert
        assert points == -1
        vote = await vote_repo.find(VoteKey(UserId(1), PostId(1)))
        assert vote.value == DOWN

        # And back again
        assert await vote_service.vote(UserId(1), PostId(1), UP) == 1

    @pytest.mark.asyncio
    async def test_points_track_sum_of_votes_through_a_sequence(self, unit_env):
        """After every vote, points should equal the sum of recorded votes."""
        # Arrange
        vote_service, post_repo, vote_repo = await _setup(unit_env)
        sequence = [
            (1, UP),
            (2, DOWN),
            (1, DOWN),
            (3, UP),
            (2, DOWN),
            (3, UP),
            (1, DOWN),
            (4, UP),
            (2, UP),
        ]

        for user_id, direction in sequence:
            # Act
            points = await vote_service.vote(UserId(user_id), PostId(1), direction)

            # Assert
            expected = await vote_repo.sum_by_post(PostId(1))
            assert points == expected
            assert await _points(post_repo, 1) == expected

        # user 1 retracted, user 2 up, user 3 retracted, user 4 up
        assert await _points(post_repo, 1) == 2

    @pytest.mark.asyncio
    async def test_votes_on_other_posts_are_untouched(self, unit_env):
        """A vote should only change its own post."""
        vote_service, post_repo, _ = await _setup(unit_env)
        make_post(post_repo, post_id=2, creator_id=100, points=0)

        await vote_service.vote(UserId(1), PostId(1), UP)

        assert await _points(post_repo, 2) == 0


class TestVoteConcurrency:
    """Tests for concurrent voters."""

    @pytest.mark.asyncio
    async def test_concurrent_upvotes_from_distinct_users_are_all_counted(
        self, unit_env
    ):
        """N users upvoting at once should leave points at exactly N."""
        # Arrange
        vote_service, post_repo, vote_repo = await _setup(unit_env)
        n = 25

        # Act
        await asyncio.gather(
            *(vote_service.vote(UserId(u), PostId(1), UP) for u in range(1, n + 1))
        )

        # Assert
        assert await _points(post_repo, 1) == n
        assert await vote_repo.sum_by_post(PostId(1)) == n

    @pytest.mark.asyncio
    async def test_concurrent_mixed_votes_keep_points_consistent(self, unit_env):
        """Interleaved ups, downs and repeats should never lose an update."""
        vote_service, post_repo, vote_repo = await _setup(unit_env)
        calls = [
            vote_service.vote(UserId(u % 7 + 1), PostId(1), UP if u % 3 else DOWN)
            for u in range(40)
        ]

        await asyncio.gather(*calls)

        assert await _points(post_repo, 1) == await vote_repo.sum_by_post(PostId(1))


class TestVoteFailures:
    """Tests for missing posts and rolled back transactions."""

    @pytest.mark.asyncio
    async def test_vote_on_missing_post_raises_and_writes_nothing(self, unit_env):
        """Voting on a post that does not exist should change no store."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.vote(UserId(1), PostId(999), UP)

        assert await vote_repo.find(VoteKey(UserId(1), PostId(999))) is None

    @pytest.mark.asyncio
    async def test_failure_mid_transaction_rolls_back_vote(
        self, unit_env, monkeypatch
    ):
        """If adjusting points fails, the inserted vote should be rolled back."""
        # Arrange
        vote_service, post_repo, vote_repo = await _setup(unit_env)

        async def broken_adjust_points(post_id, delta):
            raise OperationalError("UPDATE posts", None, Exception("connection lost"))

        monkeypatch.setattr(post_repo, "adjust_points", broken_adjust_points)

        # Act & Assert
        with pytest.raises(VoteConflictError):
            await vote_service.vote(UserId(1), PostId(1), UP)

        assert await vote_repo.find(VoteKey(UserId(1), PostId(1))) is None
        assert await _points(post_repo, 1) == 0

    @pytest.mark.asyncio
    async def test_commit_failure_raises_instead_of_returning_stale_points(self):
        """A failed commit should surface as VoteConflictError, with no changes."""

        class FailingCommitManager(InMemoryTransactionManager):
            async def commit(self) -> None:
                raise OperationalError("COMMIT", None, Exception("serialization"))

        # Arrange
        post_repo = InMemoryPostRepository()
        vote_repo = InMemoryVoteRepository()
        make_post(post_repo, post_id=1, creator_id=100, points=0)
        vote_service = VoteService(FailingCommitManager(post_repo, vote_repo))

        # Act & Assert
        with pytest.raises(VoteConflictError):
            await vote_service.vote(UserId(1), PostId(1), UP)

        assert (await post_repo.find_by_id(PostId(1))).points == 0
        assert await vote_repo.find(VoteKey(UserId(1), PostId(1))) is None
