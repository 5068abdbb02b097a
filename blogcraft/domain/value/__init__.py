"""Domain value objects for the blog."""

from blogcraft.domain.value.identifiers import (
    AuthorId,
    CategoryId,
    CommentId,
    PostId,
    TagId,
)
from blogcraft.domain.value.types import CommentStatus, PostStatus, SearchTerm, Slug

__all__ = [
    # Identifiers
    "AuthorId",
    "CategoryId",
    "CommentId",
    "PostId",
    "TagId",
    # Types
    "CommentStatus",
    "PostStatus",
    "SearchTerm",
    "Slug",
]
