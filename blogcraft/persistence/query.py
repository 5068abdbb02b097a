"""Compiles domain post queries into SQLAlchemy statements.

Every post read goes through post_select(): posts left-joined with their
author and category, with the join columns labelled author_* and
category_* for the mappers.
"""

from datetime import datetime
from typing import Iterable

from sqlalchemy import Select, and_, case, exists, func, literal, or_, select
from sqlalchemy.sql.elements import ColumnElement

from blogcraft.domain.repository import PostQuery
from blogcraft.domain.value import PostStatus, SearchTerm
from blogcraft.persistence.tables import (
    authors_table,
    categories_table,
    post_tags_table,
    posts_table,
    tags_table,
)

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_pattern(term: str) -> str:
    """ILIKE pattern matching the term anywhere in a value."""
    return f"%{escape_like(term)}%"


def post_select() -> Select:
    """Posts with their author and category joined in."""
    return select(
        posts_table,
        authors_table.c.name.label("author_name"),
        authors_table.c.bio.label("author_bio"),
        authors_table.c.avatar.label("author_avatar"),
        categories_table.c.name.label("category_name"),
        categories_table.c.slug.label("category_slug"),
        categories_table.c.description.label("category_description"),
        categories_table.c.color.label("category_color"),
    ).select_from(
        posts_table.outerjoin(
            authors_table, posts_table.c.author_id == authors_table.c.id
        ).outerjoin(categories_table, posts_table.c.category_id == categories_table.c.id)
    )


def visible(status: PostStatus, published_before: datetime) -> ColumnElement[bool]:
    """Status matches and publication time is set and not in the future."""
    return and_(
        posts_table.c.status == status.value,
        posts_table.c.published_at.is_not(None),
        posts_table.c.published_at <= published_before,
    )


def newest_first() -> tuple[ColumnElement, ColumnElement]:
    """Stable listing order: published_at DESC, id ASC."""
    return posts_table.c.published_at.desc(), posts_table.c.id.asc()


def compile_post_query(query: PostQuery) -> Select:
    """Build the SELECT for a PostQuery, predicates ANDed.

    Args:
        query: Canonical filter

    Returns:
        Statement ordered newest first and windowed by limit/offset
    """
    stmt = post_select().where(visible(query.status, query.published_before))

    if query.category_slug is not None:
        stmt = stmt.where(categories_table.c.slug == query.category_slug)

    if query.tag_slug is not None:
        tagged = (
            select(post_tags_table.c.post_id)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(tags_table.c.slug == query.tag_slug)
        )
        stmt = stmt.where(posts_table.c.id.in_(tagged))

    if query.post_id is not None:
        stmt = stmt.where(posts_table.c.id == query.post_id)

    if query.slug is not None:
        stmt = stmt.where(posts_table.c.slug == query.slug)

    return stmt.order_by(*newest_first()).limit(query.limit).offset(query.offset)


def relevance_expression(term: SearchTerm) -> tuple[ColumnElement, ColumnElement[bool]]:
    """Relevance score and match predicate for a search term.

    Returns:
        (score, matched) where matched is true if any field contains the term
    """
    pattern = contains_pattern(term.root)

    title_hit = posts_table.c.title.ilike(pattern, escape=LIKE_ESCAPE)
    content_hit = func.coalesce(posts_table.c.content, "").ilike(
        pattern, escape=LIKE_ESCAPE
    )
    tag_hit = exists(
        select(literal(1))
        .select_from(
            post_tags_table.join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
        )
        .where(
            post_tags_table.c.post_id == posts_table.c.id,
            tags_table.c.name.ilike(pattern, escape=LIKE_ESCAPE),
        )
    )

    score = (
        case((title_hit, SearchTerm.TITLE_WEIGHT), else_=0)
        + case((tag_hit, SearchTerm.TAG_WEIGHT), else_=0)
        + case((content_hit, SearchTerm.CONTENT_WEIGHT), else_=0)
    )
    return score, or_(title_hit, tag_hit, content_hit)


def compile_search(term: SearchTerm, published_before: datetime, limit: int) -> Select:
    """Build the SELECT for a free-text search over published posts."""
    score, matched = relevance_expression(term)
    return (
        post_select()
        .where(visible(PostStatus.PUBLISHED, published_before), matched)
        .order_by(score.desc(), *newest_first())
        .limit(limit)
    )


def tag_links_select(post_ids: Iterable[int]) -> Select:
    """post_tags rows for a batch of posts, left-joined with tags."""
    return (
        select(
            post_tags_table.c.post_id,
            tags_table.c.id.label("tag_id"),
            tags_table.c.name.label("tag_name"),
            tags_table.c.slug.label("tag_slug"),
        )
        .select_from(
            post_tags_table.outerjoin(
                tags_table, post_tags_table.c.tag_id == tags_table.c.id
            )
        )
        .where(post_tags_table.c.post_id.in_(list(post_ids)))
        .order_by(post_tags_table.c.post_id, tags_table.c.name)
    )
