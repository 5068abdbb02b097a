"""SQLAlchemy table definitions for the blog.

These match the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

post_status_enum = postgresql.ENUM(
    "draft",
    "published",
    "scheduled",
    "archived",
    name="post_status",
    create_type=False,
)

comment_status_enum = postgresql.ENUM(
    "pending",
    "approved",
    "rejected",
    name="comment_status",
    create_type=False,
)

# ============================================================================
# AUTHORS TABLE
# ============================================================================
authors_table = Table(
    "authors",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("bio", Text, nullable=True),
    Column("avatar", Text, nullable=True),  # Avatar image URL
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("slug", String(200), nullable=False, unique=True),
    Column("description", Text, nullable=True),
    Column("color", String(20), nullable=True),  # Hex colour for badges
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("posts_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("posts_count >= 0", name="categories_posts_count_non_negative"),
)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("slug", String(200), nullable=False, unique=True),
    Column("posts_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("posts_count >= 0", name="tags_posts_count_non_negative"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("title", String(300), nullable=False),
    Column("slug", String(200), nullable=False, unique=True),
    Column("excerpt", Text, nullable=True),
    Column("content", Text, nullable=True),  # Rich text (HTML)
    Column("featured_image_url", Text, nullable=True),
    Column(
        "author_id",
        Integer,
        ForeignKey("authors.id", ondelete="RESTRICT"),
        nullable=True,
    ),
    Column(
        "category_id",
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("status", post_status_enum, nullable=False, server_default="draft"),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
    Column("scheduled_at", TIMESTAMP(timezone=True), nullable=True),
    # Counters are nullable in rows written by older admin builds
    Column("views", Integer, nullable=True, server_default="0"),
    Column("comments_count", Integer, nullable=True, server_default="0"),
    Column("reading_time", Integer, nullable=True),  # Minutes
    Column("meta_title", String(300), nullable=True),
    Column("meta_description", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Public listing: status filter + (published_at DESC, id ASC) ordering
Index(
    "idx_posts_status_published_at",
    posts_table.c.status,
    posts_table.c.published_at.desc(),
    posts_table.c.id,
)
Index("idx_posts_category_id", posts_table.c.category_id)
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# POST_TAGS TABLE (junction table for many-to-many relationship)
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column("post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False),
    PrimaryKeyConstraint("post_id", "tag_id", name="pk_post_tags"),
)

Index("idx_post_tags_tag_id", post_tags_table.c.tag_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("author_name", String(100), nullable=False),
    Column("author_email", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column("status", comment_status_enum, nullable=False, server_default="pending"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_post_status_created_at",
    comments_table.c.post_id,
    comments_table.c.status,
    comments_table.c.created_at,
)
