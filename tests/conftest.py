"""Test configuration and record factories."""

from datetime import datetime, timedelta, timezone

import logfire

from blogcraft.domain.model import (
    Author,
    Category,
    CategorySummary,
    Comment,
    PostRecord,
    PostTagLink,
    Tag,
    TagRef,
)
from blogcraft.domain.value import (
    AuthorId,
    CategoryId,
    CommentId,
    CommentStatus,
    PostId,
    PostStatus,
    TagId,
)

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

AUTHOR = Author(id=AuthorId(1), name="Ada Writer", bio="Writes things")


def make_category(
    category_id: int,
    name: str,
    slug: str | None = None,
    posts_count: int = 0,
    is_active: bool = True,
) -> Category:
    """Build a category with a slug derived from the name."""
    return Category(
        id=CategoryId(category_id),
        name=name,
        slug=slug or name.lower().replace(" ", "-"),
        posts_count=posts_count,
        is_active=is_active,
        created_at=NOW - timedelta(days=30),
        updated_at=NOW - timedelta(days=3),
    )


def make_tag(tag_id: int, name: str, posts_count: int = 0) -> Tag:
    """Build a tag with a slug derived from the name."""
    return Tag(
        id=TagId(tag_id),
        name=name,
        slug=name.lower().replace(" ", "-"),
        posts_count=posts_count,
    )


def make_post(
    post_id: int,
    title: str,
    *,
    slug: str | None = None,
    status: PostStatus = PostStatus.PUBLISHED,
    published_at: datetime | None = None,
    updated_at: datetime | None = None,
    content: str | None = "<p>Some content.</p>",
    excerpt: str | None = None,
    category: Category | None = None,
    tags: list[Tag] | None = None,
    views: int | None = None,
    comments_count: int | None = None,
    reading_time: int | None = None,
) -> PostRecord:
    """Build a joined post record.

    published_at defaults to (100 - post_id) hours before NOW, so higher ids are
    newer.
    """
    if published_at is None and status == PostStatus.PUBLISHED:
        published_at = NOW - timedelta(hours=100 - post_id)

    return PostRecord(
        id=PostId(post_id),
        title=title,
        slug=slug or title.lower().replace(" ", "-"),
        excerpt=excerpt,
        content=content,
        author=AUTHOR,
        category=(
            CategorySummary(
                id=category.id,
                name=category.name,
                slug=category.slug,
                description=category.description,
                color=category.color,
            )
            if category
            else None
        ),
        tag_links=[
            PostTagLink(tag=TagRef(id=tag.id, name=tag.name, slug=tag.slug))
            for tag in tags or []
        ],
        status=status,
        published_at=published_at,
        updated_at=updated_at,
        views=views,
        comments_count=comments_count,
        reading_time=reading_time,
    )


def make_comment(
    comment_id: int,
    post_id: int,
    content: str,
    status: CommentStatus = CommentStatus.APPROVED,
    created_at: datetime | None = None,
) -> Comment:
    """Build a stored comment."""
    return Comment(
        id=CommentId(comment_id),
        post_id=PostId(post_id),
        author_name="Reader",
        author_email="reader@example.com",
        content=content,
        status=status,
        created_at=created_at or NOW - timedelta(minutes=comment_id),
    )
