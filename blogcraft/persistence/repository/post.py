"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

import logfire
from sqlalchemy import func, update
from sqlalchemy.ext.asyncio import AsyncSession

from blogcraft.domain.model import PostRecord
from blogcraft.domain.repository import PostQuery, PostRepository
from blogcraft.domain.value import PostId, SearchTerm
from blogcraft.persistence.error import backend_operation
from blogcraft.persistence.mappers import group_tag_rows, row_to_post_record
from blogcraft.persistence.query import (
    compile_post_query,
    compile_search,
    tag_links_select,
)
from blogcraft.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _attach_tags(self, rows: Sequence[Dict[str, Any]]) -> List[PostRecord]:
        """Fetch tag links for a batch of post rows in one query.

        Args:
            rows: Joined post rows as dicts

        Returns:
            PostRecords in the same order as rows
        """
        if not rows:
            return []

        result = await self.session.execute(
            tag_links_select(row["id"] for row in rows)
        )
        tags_by_post = group_tag_rows(r._asdict() for r in result.fetchall())

        return [row_to_post_record(row, tags_by_post.get(row["id"], [])) for row in rows]

    async def find_many(self, query: PostQuery) -> List[PostRecord]:
        """Find posts matching a query."""
        with backend_operation("posts.find_many"):
            result = await self.session.execute(compile_post_query(query))
            rows = [row._asdict() for row in result.fetchall()]
            return await self._attach_tags(rows)

    async def find_one(self, query: PostQuery) -> Optional[PostRecord]:
        """Find the first post matching a query."""
        single = query.model_copy(update={"limit": 1, "offset": 0})
        with backend_operation("posts.find_one"):
            result = await self.session.execute(compile_post_query(single))
            row = result.fetchone()
            if row is None:
                return None
            records = await self._attach_tags([row._asdict()])
            return records[0]

    async def search(
        self, term: SearchTerm, published_before: datetime, limit: int
    ) -> List[PostRecord]:
        """Find published posts containing a term, best matches first."""
        with backend_operation("posts.search"):
            result = await self.session.execute(
                compile_search(term, published_before, limit)
            )
            rows = [row._asdict() for row in result.fetchall()]
            return await self._attach_tags(rows)

    async def increment_views(self, post_id: PostId) -> None:
        """Atomically increment the view counter inside a savepoint.

        A failure rolls back only the savepoint, leaving the request's
        session usable.
        """
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(views=func.coalesce(posts_table.c.views, 0) + 1)
        )
        with backend_operation("posts.increment_views"):
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)

        if result.rowcount == 0:
            logfire.warn("View increment matched no post", post_id=post_id)
