"""PostgreSQL repository implementations."""

from blogcraft.persistence.repository.category import PostgresCategoryRepository
from blogcraft.persistence.repository.comment import PostgresCommentRepository
from blogcraft.persistence.repository.post import PostgresPostRepository
from blogcraft.persistence.repository.tag import PostgresTagRepository

__all__ = [
    "PostgresCategoryRepository",
    "PostgresCommentRepository",
    "PostgresPostRepository",
    "PostgresTagRepository",
]
