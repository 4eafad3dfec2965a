"""SQLAlchemy table definitions for the board.

These Core tables are used by the PostgreSQL repositories.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("email", String(255), nullable=False),  # Stored lower-cased
    Column("name", String(50), nullable=False),
    Column("password_hash", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", name="uq_users_email"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_name", String(50), nullable=False),  # Denormalized
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_created_at", posts_table.c.created_at.desc())

# ============================================================================
# COMMENTS TABLE (adjacency list via parent_id)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_name", String(50), nullable=False),  # Denormalized
    Column("content", Text, nullable=False),
    Column(
        "parent_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("depth >= 0", name="ck_comments_depth"),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# VOTE TABLES (one row per subject and user, kind is like or dislike)
# ============================================================================
post_votes_table = Table(
    "post_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("kind", String(10), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_id", name="uq_post_votes_post_user"),
    CheckConstraint("kind IN ('like', 'dislike')", name="ck_post_votes_kind"),
)

Index("idx_post_votes_post_kind", post_votes_table.c.post_id, post_votes_table.c.kind)

comment_votes_table = Table(
    "comment_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("kind", String(10), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "user_id", name="uq_comment_votes_comment_user"),
    CheckConstraint("kind IN ('like', 'dislike')", name="ck_comment_votes_kind"),
)

Index(
    "idx_comment_votes_comment_kind",
    comment_votes_table.c.comment_id,
    comment_votes_table.c.kind,
)
