"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blogcraft.domain.model.tag import Tag


class TagRepository(ABC):
    """Repository for tags. Raises BackendError on backend failure."""

    @abstractmethod
    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by posts_count DESC, name ASC."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Tag]:
        """Find tag by slug.

        Args:
            slug: Tag slug

        Returns:
            Tag if found, None otherwise
        """
        pass
