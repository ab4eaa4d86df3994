"""User batch loader.

Resolving `Post.creator` for every post on a feed page would otherwise cost
one query per post.
"""

from typing import Optional

import logfire
from sqlalchemy.exc import SQLAlchemyError
from strawberry.dataloader import DataLoader

from updoot.domain.error import BatchFetchError
from updoot.domain.model.user import User
from updoot.domain.repository import UserRepository
from updoot.domain.value import UserId

from .base import order_by_keys


class UserLoader(DataLoader[UserId, Optional[User]]):
    """Loads users by ID, one bulk query per batch."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user loader.

        Args:
            user_repository: User repository
        """
        super().__init__(load_fn=self.batch_load)
        self.user_repository = user_repository

    async def batch_load(self, user_ids: list[UserId]) -> list[Optional[User]]:
        """Fetch every user in the batch with a single query.

        Raises:
            BatchFetchError: If the query failed; every caller in the
                batch receives this error
        """
        with logfire.span("user_loader.batch_load", key_count=len(user_ids)):
            try:
                users = await self.user_repository.find_by_ids(user_ids)
            except SQLAlchemyError as e:
                logfire.error(
                    "User batch fetch failed", key_count=len(user_ids), error=str(e)
                )
                raise BatchFetchError("UserLoader", len(user_ids), str(e)) from e

            return order_by_keys(user_ids, users, key_of=lambda user: user.id)
