"""In-memory category repository for testing."""

from typing import Optional

from blogcraft.domain.model.category import Category
from blogcraft.domain.repository.category import CategoryRepository

from .store import InMemoryContentStore


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self, store: InMemoryContentStore) -> None:
        self._store = store

    async def find_active(self) -> list[Category]:
        """Find active categories, busiest first."""
        categories = [c for c in self._store.categories.values() if c.is_active]
        return sorted(categories, key=lambda c: (-c.posts_count, c.name))

    async def find_active_by_slug(self, slug: str) -> Optional[Category]:
        """Find an active category by slug."""
        for category in self._store.categories.values():
            if category.slug == slug and category.is_active:
                return category
        return None
