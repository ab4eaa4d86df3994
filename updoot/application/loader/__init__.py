"""Request-scoped batch loaders.

Each request gets its own loaders, so batching and caching never cross
request boundaries.

Usage in a resolver:
    loaders = info.context.loaders
    user = await loaders.users.load(post.creator_id)
"""

from dataclasses import dataclass

from updoot.domain.repository import UserRepository, VoteRepository

from .updoot import UpdootLoader
from .user import UserLoader


@dataclass
class Loaders:
    """Container for the loaders of one request."""

    users: UserLoader
    updoots: UpdootLoader


def create_loaders(
    user_repository: UserRepository, vote_repository: VoteRepository
) -> Loaders:
    """Build fresh loaders for one request.

    Args:
        user_repository: User repository bound to the request
        vote_repository: Vote repository bound to the request

    Returns:
        Loaders with empty caches
    """
    return Loaders(
        users=UserLoader(user_repository),
        updoots=UpdootLoader(vote_repository),
    )


__all__ = ["Loaders", "UpdootLoader", "UserLoader", "create_loaders"]
