"""Posts-by-category and posts-by-tag use cases."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blogcraft.domain.model import Category, Post, Tag
from blogcraft.domain.repository import ViewIntent
from blogcraft.domain.service import PostService, QueryBuilder, TaxonomyService
from blogcraft.domain.value import Slug


class TaxonomyPostsRequest(BaseModel):
    """Posts for one category or tag, paginated."""

    slug: str
    limit: int | None = None
    offset: int = 0


class CategoryPostsResponse(BaseModel):
    """Category with one page of its published posts."""

    category: Category
    posts: list[Post]
    limit: int
    offset: int


class TagPostsResponse(BaseModel):
    """Tag with one page of its published posts."""

    tag: Tag
    posts: list[Post]
    limit: int
    offset: int


class ListCategoryPostsUseCase:
    """Use case for the published posts in an active category."""

    def __init__(
        self,
        taxonomy_service: TaxonomyService,
        post_service: PostService,
        query_builder: QueryBuilder,
    ) -> None:
        """Initialize category posts use case.

        Args:
            taxonomy_service: Resolves the category
            post_service: Lists the posts
            query_builder: Reports the effective page window
        """
        self.taxonomy_service = taxonomy_service
        self.post_service = post_service
        self.query_builder = query_builder

    async def execute(
        self, request: TaxonomyPostsRequest
    ) -> Optional[CategoryPostsResponse]:
        """Execute category posts flow.

        Returns:
            None if no active category has this slug
        """
        with logfire.span("list_category_posts.execute", slug=request.slug):
            category = await self.taxonomy_service.get_category(request.slug)
            if not category:
                return None

            limit, offset = self.query_builder.clamp_window(
                request.limit, request.offset
            )
            posts = await self.post_service.list_posts(
                ViewIntent.by_category(Slug(category.slug), limit, offset)
            )
            return CategoryPostsResponse(
                category=category, posts=posts, limit=limit, offset=offset
            )


class ListTagPostsUseCase:
    """Use case for the published posts carrying a tag."""

    def __init__(
        self,
        taxonomy_service: TaxonomyService,
        post_service: PostService,
        query_builder: QueryBuilder,
    ) -> None:
        self.taxonomy_service = taxonomy_service
        self.post_service = post_service
        self.query_builder = query_builder

    async def execute(self, request: TaxonomyPostsRequest) -> Optional[TagPostsResponse]:
        """Execute tag posts flow.

        Returns:
            None if no tag has this slug
        """
        with logfire.span("list_tag_posts.execute", slug=request.slug):
            tag = await self.taxonomy_service.get_tag(request.slug)
            if not tag:
                return None

            limit, offset = self.query_builder.clamp_window(
                request.limit, request.offset
            )
            posts = await self.post_service.list_posts(
                ViewIntent.by_tag(Slug(tag.slug), limit, offset)
            )
            return TagPostsResponse(tag=tag, posts=posts, limit=limit, offset=offset)
