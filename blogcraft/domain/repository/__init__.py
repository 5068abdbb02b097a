"""Repository interfaces for the blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blogcraft.domain.repository.category import CategoryRepository
from blogcraft.domain.repository.comment import CommentRepository
from blogcraft.domain.repository.post import PostRepository
from blogcraft.domain.repository.query import PostQuery, ViewIntent, ViewKind
from blogcraft.domain.repository.tag import TagRepository

__all__ = [
    "CategoryRepository",
    "CommentRepository",
    "PostQuery",
    "PostRepository",
    "TagRepository",
    "ViewIntent",
    "ViewKind",
]
