"""Vote entity ("updoot").

One user's directional vote on one post.
"""

from updoot.domain.model.common import DomainModel
from updoot.domain.value import PostId, UserId, VoteDirection, VoteKey


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per (user, post), enforced by the composite primary key
    - Value is +1 or -1, enforced by VoteDirection and a CHECK constraint
    """

    user_id: UserId
    post_id: PostId
    value: VoteDirection

    @property
    def key(self) -> VoteKey:
        """Composite key of this vote."""
        return VoteKey(self.user_id, self.post_id)
