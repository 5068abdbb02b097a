"""Category and tag use cases."""

from .get_category import GetCategoryRequest, GetCategoryUseCase
from .get_tag import GetTagRequest, GetTagUseCase
from .list_categories import ListCategoriesResponse, ListCategoriesUseCase
from .list_tags import ListTagsResponse, ListTagsUseCase
from .taxonomy_posts import (
    CategoryPostsResponse,
    ListCategoryPostsUseCase,
    ListTagPostsUseCase,
    TagPostsResponse,
    TaxonomyPostsRequest,
)

__all__ = [
    "CategoryPostsResponse",
    "GetCategoryRequest",
    "GetCategoryUseCase",
    "GetTagRequest",
    "GetTagUseCase",
    "ListCategoriesResponse",
    "ListCategoriesUseCase",
    "ListCategoryPostsUseCase",
    "ListTagPostsUseCase",
    "ListTagsResponse",
    "ListTagsUseCase",
    "TagPostsResponse",
    "TaxonomyPostsRequest",
]
