"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blogcraft.domain.model.category import Category


class CategoryRepository(ABC):
    """Repository for categories. Raises BackendError on backend failure."""

    @abstractmethod
    async def find_active(self) -> list[Category]:
        """Find active categories ordered by posts_count DESC, name ASC."""
        pass

    @abstractmethod
    async def find_active_by_slug(self, slug: str) -> Optional[Category]:
        """Find an active category by slug.

        Args:
            slug: Category slug

        Returns:
            Category if found and active, None otherwise
        """
        pass
