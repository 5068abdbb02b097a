"""PostgreSQL implementation of Tag repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blogcraft.domain.model import Tag
from blogcraft.domain.repository import TagRepository
from blogcraft.persistence.error import backend_operation
from blogcraft.persistence.mappers import row_to_tag
from blogcraft.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_all(self) -> list[Tag]:
        """Find all tags, most used first."""
        stmt = select(tags_table).order_by(
            tags_table.c.posts_count.desc(), tags_table.c.name
        )
        with backend_operation("tags.find_all"):
            result = await self.session.execute(stmt)
            return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_by_slug(self, slug: str) -> Optional[Tag]:
        """Find tag by slug."""
        stmt = select(tags_table).where(tags_table.c.slug == slug)
        with backend_operation("tags.find_by_slug"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_tag(row._asdict()) if row else None
