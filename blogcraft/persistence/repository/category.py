"""PostgreSQL implementation of Category repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blogcraft.domain.model import Category
from blogcraft.domain.repository import CategoryRepository
from blogcraft.persistence.error import backend_operation
from blogcraft.persistence.mappers import row_to_category
from blogcraft.persistence.tables import categories_table


class PostgresCategoryRepository(CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_active(self) -> list[Category]:
        """Find active categories, busiest first."""
        stmt = (
            select(categories_table)
            .where(categories_table.c.is_active.is_(True))
            .order_by(categories_table.c.posts_count.desc(), categories_table.c.name)
        )
        with backend_operation("categories.find_active"):
            result = await self.session.execute(stmt)
            return [row_to_category(row._asdict()) for row in result.fetchall()]

    async def find_active_by_slug(self, slug: str) -> Optional[Category]:
        """Find an active category by slug."""
        stmt = select(categories_table).where(
            categories_table.c.slug == slug,
            categories_table.c.is_active.is_(True),
        )
        with backend_operation("categories.find_active_by_slug"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_category(row._asdict()) if row else None
