"""Unit tests for PostgresTransactionManager ordering."""

from contextlib import asynccontextmanager

import pytest

from updoot.persistence.repository import (
    PostgresPostRepository,
    PostgresTransactionManager,
    PostgresVoteRepository,
)


class FakeRequestSession:
    """Request session that records commits."""

    def __init__(self, events: list[str], dirty: bool):
        self.info: dict = {}
        self.events = events
        self.dirty = dirty

    def in_transaction(self) -> bool:
        return self.dirty

    async def commit(self):
        self.events.append("request.commit")
        self.dirty = False


class FakeTxSession:
    """Transaction session that records its lifecycle."""

    def __init__(self, events: list[str]):
        self.info: dict = {}
        self.events = events

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        self.events.append("tx.close")
        return False

    @asynccontextmanager
    async def begin(self):
        self.events.append("tx.begin")
        try:
            yield
        except Exception:
            self.events.append("tx.rollback")
            raise
        self.events.append("tx.commit")


def _manager(dirty: bool) -> tuple[PostgresTransactionManager, list[str]]:
    events: list[str] = []
    manager = PostgresTransactionManager(
        lambda: FakeTxSession(events), FakeRequestSession(events, dirty)
    )
    return manager, events


class TestPostgresTransactionManager:
    """Tests for how transactions relate to the request session."""

    @pytest.mark.asyncio
    async def test_pending_request_writes_commit_before_transaction(self):
        """An earlier edit's row lock must be released before the vote locks."""
        manager, events = _manager(dirty=True)

        async with manager.begin() as tx:
            assert isinstance(tx.posts, PostgresPostRepository)
            assert isinstance(tx.votes, PostgresVoteRepository)
            events.append("work")

        assert events == [
            "request.commit",
            "tx.begin",
            "work",
            "tx.commit",
            "tx.close",
        ]

    @pytest.mark.asyncio
    async def test_idle_request_session_is_left_alone(self):
        manager, events = _manager(dirty=False)

        async with manager.begin():
            pass

        assert events == ["tx.begin", "tx.commit", "tx.close"]

    @pytest.mark.asyncio
    async def test_error_rolls_back_and_propagates(self):
        manager, events = _manager(dirty=False)

        with pytest.raises(RuntimeError):
            async with manager.begin():
                raise RuntimeError("boom")

        assert events == ["tx.begin", "tx.rollback", "tx.close"]
