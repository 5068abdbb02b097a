"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from blogcraft.domain.model.post import PostRecord
from blogcraft.domain.repository.query import PostQuery
from blogcraft.domain.value import PostId, SearchTerm


class PostRepository(ABC):
    """Repository for posts.

    Returned records carry author, category and tag join rows. Every method
    raises BackendError when the backend reports a failure.
    """

    @abstractmethod
    async def find_many(self, query: PostQuery) -> List[PostRecord]:
        """Find posts matching a query.

        Args:
            query: Canonical filter with pagination window

        Returns:
            Matching posts ordered by published_at DESC, id ASC
        """
        pass

    @abstractmethod
    async def find_one(self, query: PostQuery) -> Optional[PostRecord]:
        """Find the first post matching a query.

        Args:
            query: Canonical filter, usually an id or slug lookup

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def search(
        self, term: SearchTerm, published_before: datetime, limit: int
    ) -> List[PostRecord]:
        """Find published posts whose title, content or tag names contain a term.

        Args:
            term: Search term (case-insensitive substring)
            published_before: Visibility cutoff for published_at
            limit: Maximum number of posts to return

        Returns:
            Matching posts ordered by relevance DESC, published_at DESC, id ASC
        """
        pass

    @abstractmethod
    async def increment_views(self, post_id: PostId) -> None:
        """Atomically increment a post's view counter by 1.

        Args:
            post_id: The post ID
        """
        pass
