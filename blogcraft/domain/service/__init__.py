"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .post_service import PostService
from .query_builder import QueryBuilder
from .search_service import SearchService
from .taxonomy_service import TaxonomyService
from .view_assembler import ViewAssembler
from .view_counter import ViewCounter

__all__ = [
    "CommentService",
    "PostService",
    "QueryBuilder",
    "SearchService",
    "Service",
    "TaxonomyService",
    "ViewAssembler",
    "ViewCounter",
]
