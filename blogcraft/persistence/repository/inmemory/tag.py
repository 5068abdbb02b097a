"""In-memory tag repository for testing."""

from typing import Optional

from blogcraft.domain.model.tag import Tag
from blogcraft.domain.repository.tag import TagRepository

from .store import InMemoryContentStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryContentStore) -> None:
        self._store = store

    async def find_all(self) -> list[Tag]:
        """Find all tags, most used first."""
        return sorted(self._store.tags.values(), key=lambda t: (-t.posts_count, t.name))

    async def find_by_slug(self, slug: str) -> Optional[Tag]:
        """Find tag by slug."""
        for tag in self._store.tags.values():
            if tag.slug == slug:
                return tag
        return None
