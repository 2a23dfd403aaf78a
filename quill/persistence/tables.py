"""SQLAlchemy table definitions for Quill.

Tables are plain SQLAlchemy Core; rows are mapped to the pydantic domain
models by hand in ``mappers``. They match the schema defined in the
Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
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
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# Primary keys are int4 SERIAL columns
MAX_ID = 2**31 - 1


def is_storable_id(value: int) -> bool:
    """Whether ``value`` can be the primary key of a row.

    Out-of-range values are rejected by the driver before the query runs,
    so lookups check this first and report "not found".
    """
    return 1 <= value <= MAX_ID

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("username", String(30), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("name", String(100), nullable=True),
    Column("bio", String(500), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# BLOGS TABLE
# ============================================================================
blogs_table = Table(
    "blogs",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "author_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column("image_url", Text, nullable=True),
    Column("published", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_blogs_author", blogs_table.c.author_id)
Index("idx_blogs_created", blogs_table.c.created_at.desc())

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "blog_id",
        Integer,
        ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_blog", comments_table.c.blog_id, comments_table.c.created_at)

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "blog_id",
        Integer,
        ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "type",
        postgresql.ENUM("LIKE", "DISLIKE", name="like_type", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One reaction per user per blog
    UniqueConstraint("blog_id", "user_id", name="uq_likes_blog_user"),
)

Index("idx_likes_blog_type", likes_table.c.blog_id, likes_table.c.type)
