"""Unit tests for the GraphQL schema, executed without HTTP."""

from typing import Optional

import pytest
import pytest_asyncio
from starlette.responses import Response

from updoot.application.loader import Loaders
from updoot.config import Settings
from updoot.domain.service import VoteService
from updoot.domain.value import PostId, UserId, VoteDirection
from updoot.interface.graphql import Context, schema
from updoot.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryUserRepository,
)
from tests.di import build_test_container
from tests.factories import make_post, make_user

FEED_QUERY = """
query Feed($limit: Int!, $cursor: String) {
  posts(limit: $limit, cursor: $cursor) {
    hasMore
    posts {
      id
      title
      textSnippet
      points
      createdAt
      voteStatus
      creator { id username }
    }
  }
}
"""

VOTE_MUTATION = """
mutation Vote($postId: Int!, $value: Int!) {
  vote(postId: $postId, value: $value)
}
"""

REGISTER_MUTATION = """
mutation Register($options: UsernamePasswordInput!) {
  register(options: $options) {
    errors { field message }
    user { id username }
  }
}
"""


@pytest_asyncio.fixture
async def container():
    container = build_test_container()
    yield container
    await container.close()


async def _execute(
    container,
    query: str,
    variables: Optional[dict] = None,
    user_id: Optional[int] = None,
):
    """Run one GraphQL operation as its own request.

    Returns:
        Execution result and the response that collected cookies
    """
    async with container() as request_container:
        context = Context(
            container=request_container,
            loaders=await request_container.get(Loaders),
            settings=await request_container.get(Settings),
            user_id=UserId(user_id) if user_id is not None else None,
        )
        context.response = Response()
        result = await schema.execute(
            query, variable_values=variables, context_value=context
        )
    return result, context.response


async def _seed_feed(container) -> list:
    """Three authors and five posts, post N by author N % 3 + 1."""
    users = await container.get(InMemoryUserRepository)
    posts = await container.get(InMemoryPostRepository)
    authors = [await make_user(users, name) for name in ("alice", "bobby", "carol")]
    for i in range(1, 6):
        make_post(posts, post_id=i, creator_id=authors[i % 3].id, minutes=i)
    return authors


class TestFeedQuery:
    """Tests for the posts query."""

    @pytest.mark.asyncio
    async def test_feed_resolves_creators_with_one_bulk_fetch(
        self, container, monkeypatch
    ):
        """Every creator on the page should come from a single user query."""
        # Arrange
        await _seed_feed(container)
        users = await container.get(InMemoryUserRepository)
        calls = []
        original = users.find_by_ids

        async def counting_find_by_ids(user_ids):
            calls.append(sorted(user_ids))
            return await original(user_ids)

        monkeypatch.setattr(users, "find_by_ids", counting_find_by_ids)

        # Act
        result, _ = await _execute(container, FEED_QUERY, {"limit": 5})

        # Assert
        assert result.errors is None
        page = result.data["posts"]
        assert page["hasMore"] is False
        assert [p["id"] for p in page["posts"]] == [5, 4, 3, 2, 1]
        assert [p["creator"]["username"] for p in page["posts"]] == [
            "carol",
            "bobby",
            "alice",
            "carol",
            "bobby",
        ]
        assert calls == [[1, 2, 3]]

    @pytest.mark.asyncio
    async def test_vote_status_is_null_without_session(self, container):
        await _seed_feed(container)

        result, _ = await _execute(container, FEED_QUERY, {"limit": 3})

        assert result.errors is None
        assert all(p["voteStatus"] is None for p in result.data["posts"]["posts"])

    @pytest.mark.asyncio
    async def test_vote_status_reflects_session_user_votes(self, container):
        """voteStatus should show only the session user's own votes."""
        # Arrange
        await _seed_feed(container)
        async with container() as request_container:
            vote_service = await request_container.get(VoteService)
            await vote_service.vote(UserId(1), PostId(5), VoteDirection.UP)
            await vote_service.vote(UserId(1), PostId(4), VoteDirection.DOWN)
            await vote_service.vote(UserId(2), PostId(3), VoteDirection.UP)

        # Act
        result, _ = await _execute(container, FEED_QUERY, {"limit": 3}, user_id=1)

        # Assert
        assert result.errors is None
        posts = result.data["posts"]["posts"]
        assert [p["voteStatus"] for p in posts] == [1, -1, None]
        assert [p["points"] for p in posts] == [1, -1, 1]

    @pytest.mark.asyncio
    async def test_cursor_is_created_at_of_last_post(self, container):
        """Passing the last createdAt back should continue the feed."""
        await _seed_feed(container)

        first, _ = await _execute(container, FEED_QUERY, {"limit": 2})
        cursor = first.data["posts"]["posts"][-1]["createdAt"]
        second, _ = await _execute(
            container, FEED_QUERY, {"limit": 2, "cursor": cursor}
        )

        assert [p["id"] for p in second.data["posts"]["posts"]] == [3, 2]
        assert second.data["posts"]["hasMore"] is True

    @pytest.mark.asyncio
    async def test_malformed_cursor_is_a_graphql_error(self, container):
        result, _ = await _execute(
            container, FEED_QUERY, {"limit": 2, "cursor": "not-a-cursor"}
        )

        assert result.errors
        assert "Invalid cursor" in result.errors[0].message


class TestVoteMutation:
    """Tests for the vote mutation."""

    @pytest.mark.asyncio
    async def test_vote_returns_new_points(self, container):
        await _seed_feed(container)

        result, _ = await _execute(
            container, VOTE_MUTATION, {"postId": 1, "value": 1}, user_id=2
        )

        assert result.errors is None
        assert result.data["vote"] == 1

    @pytest.mark.asyncio
    async def test_vote_without_session_is_an_error(self, container):
        """Anonymous votes should fail and change nothing."""
        await _seed_feed(container)

        result, _ = await _execute(container, VOTE_MUTATION, {"postId": 1, "value": 1})

        assert result.errors
        assert result.errors[0].message == "not authenticated"
        posts = await container.get(InMemoryPostRepository)
        assert (await posts.find_by_id(PostId(1))).points == 0

    @pytest.mark.asyncio
    async def test_vote_on_missing_post_is_null(self, container):
        result, _ = await _execute(
            container, VOTE_MUTATION, {"postId": 99, "value": -1}, user_id=2
        )

        assert result.errors is None
        assert result.data["vote"] is None


class TestAuthMutations:
    """Tests for session handling in auth mutations."""

    @pytest.mark.asyncio
    async def test_register_sets_http_only_session_cookie(self, container):
        # Act
        result, response = await _execute(
            container,
            REGISTER_MUTATION,
            {
                "options": {
                    "username": "alice",
                    "email": "alice@example.com",
                    "password": "hunter2hunter2",
                }
            },
        )

        # Assert
        assert result.errors is None
        assert result.data["register"]["errors"] is None
        assert result.data["register"]["user"]["username"] == "alice"
        cookie = response.headers["set-cookie"]
        assert cookie.startswith("qid=")
        assert "HttpOnly" in cookie

    @pytest.mark.asyncio
    async def test_failed_register_sets_no_cookie(self, container):
        result, response = await _execute(
            container,
            REGISTER_MUTATION,
            {
                "options": {
                    "username": "al",
                    "email": "alice@example.com",
                    "password": "hunter2hunter2",
                }
            },
        )

        assert result.data["register"]["user"] is None
        assert result.data["register"]["errors"] == [
            {
                "field": "username",
                "message": "username must be atleast 4 characters long",
            }
        ]
        assert "set-cookie" not in response.headers

    @pytest.mark.asyncio
    async def test_logout_clears_cookie(self, container):
        result, response = await _execute(
            container, "mutation { logout }", user_id=1
        )

        assert result.data["logout"] is True
        assert 'qid=""' in response.headers["set-cookie"]
