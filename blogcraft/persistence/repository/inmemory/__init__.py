"""In-memory repository implementations for testing."""

from .category import InMemoryCategoryRepository
from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .store import InMemoryContentStore
from .tag import InMemoryTagRepository

__all__ = [
    "InMemoryCategoryRepository",
    "InMemoryCommentRepository",
    "InMemoryContentStore",
    "InMemoryPostRepository",
    "InMemoryTagRepository",
]
