"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, List

from blogcraft.domain.model import (
    Author,
    Category,
    CategorySummary,
    Comment,
    NewComment,
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


def row_to_author(row: Dict[str, Any]) -> Author | None:
    """Extract the joined author columns from a post row.

    Returns None when the post has no author or the author row is gone.
    """
    if row.get("author_id") is None or row.get("author_name") is None:
        return None
    return Author(
        id=AuthorId(row["author_id"]),
        name=row["author_name"],
        bio=row.get("author_bio"),
        avatar=row.get("author_avatar"),
    )


def row_to_category_summary(row: Dict[str, Any]) -> CategorySummary | None:
    """Extract the joined category columns from a post row."""
    if row.get("category_id") is None or row.get("category_slug") is None:
        return None
    return CategorySummary(
        id=CategoryId(row["category_id"]),
        name=row["category_name"],
        slug=row["category_slug"],
        description=row.get("category_description"),
        color=row.get("category_color"),
    )


def row_to_tag_link(row: Dict[str, Any]) -> PostTagLink:
    """Convert a post_tags row left-joined with tags.

    Args:
        row: Dict with tag_id, tag_name and tag_slug (all None if dangling)

    Returns:
        Link with the tag attached, or an empty link
    """
    if row.get("tag_id") is None or row.get("tag_name") is None:
        return PostTagLink(tag=None)
    return PostTagLink(
        tag=TagRef(
            id=TagId(row["tag_id"]),
            name=row["tag_name"],
            slug=row["tag_slug"],
        )
    )


def row_to_post_record(
    row: Dict[str, Any], tag_rows: Iterable[Dict[str, Any]] = ()
) -> PostRecord:
    """Convert a joined post row to a PostRecord.

    Args:
        row: posts columns plus author_* and category_* labelled columns
        tag_rows: post_tags rows for this post

    Returns:
        PostRecord domain model
    """
    return PostRecord(
        id=PostId(row["id"]),
        title=row["title"],
        slug=row["slug"],
        excerpt=row.get("excerpt"),
        content=row.get("content"),
        featured_image_url=row.get("featured_image_url"),
        author=row_to_author(row),
        category=row_to_category_summary(row),
        tag_links=[row_to_tag_link(tag_row) for tag_row in tag_rows],
        status=PostStatus(row["status"]),
        published_at=row.get("published_at"),
        updated_at=row.get("updated_at"),
        views=row.get("views"),
        comments_count=row.get("comments_count"),
        reading_time=row.get("reading_time"),
        meta_title=row.get("meta_title"),
        meta_description=row.get("meta_description"),
    )


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model."""
    return Category(
        id=CategoryId(row["id"]),
        name=row["name"],
        slug=row["slug"],
        description=row.get("description"),
        color=row.get("color"),
        is_active=row.get("is_active", True),
        posts_count=max(row.get("posts_count") or 0, 0),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(row["id"]),
        name=row["name"],
        slug=row["slug"],
        posts_count=max(row.get("posts_count") or 0, 0),
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        author_name=row["author_name"],
        author_email=row["author_email"],
        content=row["content"],
        status=CommentStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row.get("updated_at"),
    )


def new_comment_to_dict(comment: NewComment) -> Dict[str, Any]:
    """Convert a comment submission to a database insert dict."""
    values = comment.model_dump()
    values["status"] = comment.status.value
    return values


def group_tag_rows(rows: Iterable[Dict[str, Any]]) -> Dict[int, List[Dict[str, Any]]]:
    """Group post_tags rows by post_id, preserving row order."""
    grouped: Dict[int, List[Dict[str, Any]]] = {}
    for row in rows:
        grouped.setdefault(row["post_id"], []).append(row)
    return grouped
