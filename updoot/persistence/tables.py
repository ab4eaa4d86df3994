"""SQLAlchemy table definitions for Updoot.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("username", String(255), nullable=False),
    Column("email", String(255), nullable=False),
    Column("password", Text, nullable=False),  # bcrypt hash
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # UserService reads the duplicated column from the constraint name
    UniqueConstraint("username", name="uq_users_username"),
    UniqueConstraint("email", name="uq_users_email"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(300), nullable=False),
    Column("text", Text, nullable=False),
    # Running sum of votes.value for this post, written only by the vote service
    Column("points", Integer, nullable=False, server_default="0"),
    Column("creator_id", Integer, ForeignKey("users.id"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Feed ordering
Index(
    "idx_posts_created_at",
    posts_table.c.created_at.desc(),
    posts_table.c.id.desc(),
)
Index("idx_posts_creator_id", posts_table.c.creator_id)

# ============================================================================
# VOTES TABLE ("updoots")
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("post_id", Integer, ForeignKey("posts.id"), nullable=False),
    Column("value", Integer, nullable=False),
    PrimaryKeyConstraint("user_id", "post_id", name="pk_votes"),
    CheckConstraint("value IN (-1, 1)", name="ck_votes_value"),
)

Index("idx_votes_post_id", votes_table.c.post_id)
