"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from blogcraft.domain.model.post import PostRecord
from blogcraft.domain.repository.post import PostRepository
from blogcraft.domain.repository.query import PostQuery
from blogcraft.domain.value import PostId, PostStatus, SearchTerm

from .store import InMemoryContentStore


def _is_visible(post: PostRecord, status: PostStatus, published_before: datetime) -> bool:
    return (
        post.status == status
        and post.published_at is not None
        and post.published_at <= published_before
    )


def _newest_first(posts: list[PostRecord]) -> list[PostRecord]:
    # Two stable sorts: id ASC, then published_at DESC
    posts = sorted(posts, key=lambda p: p.id)
    return sorted(posts, key=lambda p: p.published_at, reverse=True)


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryContentStore) -> None:
        self._store = store

    def _matching(self, query: PostQuery) -> list[PostRecord]:
        posts = [
            p
            for p in self._store.posts.values()
            if _is_visible(p, query.status, query.published_before)
        ]

        if query.category_slug is not None:
            posts = [
                p for p in posts if p.category and p.category.slug == query.category_slug
            ]

        if query.tag_slug is not None:
            posts = [
                p
                for p in posts
                if any(
                    link.tag is not None and link.tag.slug == query.tag_slug
                    for link in p.tag_links
                )
            ]

        if query.post_id is not None:
            posts = [p for p in posts if p.id == query.post_id]

        if query.slug is not None:
            posts = [p for p in posts if p.slug == query.slug]

        return _newest_first(posts)

    async def find_many(self, query: PostQuery) -> list[PostRecord]:
        """Find posts matching a query."""
        posts = self._matching(query)
        return posts[query.offset : query.offset + query.limit]

    async def find_one(self, query: PostQuery) -> Optional[PostRecord]:
        """Find the first post matching a query."""
        posts = self._matching(query)
        return posts[0] if posts else None

    async def search(
        self, term: SearchTerm, published_before: datetime, limit: int
    ) -> list[PostRecord]:
        """Find published posts containing a term, best matches first."""
        scored = []
        for post in self._store.posts.values():
            if not _is_visible(post, PostStatus.PUBLISHED, published_before):
                continue
            score = term.relevance(post.title, post.content, post.tag_names)
            if score:
                scored.append((score, post))

        ranked = _newest_first([post for _, post in scored])
        scores = {post.id: score for score, post in scored}
        ranked = sorted(ranked, key=lambda p: scores[p.id], reverse=True)
        return ranked[:limit]

    async def increment_views(self, post_id: PostId) -> None:
        """Increment the view counter by 1."""
        post = self._store.posts.get(post_id)
        if post is None:
            return
        self._store.posts[post_id] = post.model_copy(
            update={"views": (post.views or 0) + 1}
        )
