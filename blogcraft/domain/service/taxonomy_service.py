"""Category and tag reads."""

import logfire

from blogcraft.domain.error import BackendError
from blogcraft.domain.model.category import Category
from blogcraft.domain.model.tag import Tag
from blogcraft.domain.repository import CategoryRepository, TagRepository
from blogcraft.domain.value import Slug

from .base import Service


class TaxonomyService(Service):
    """Domain service for the category and tag directories.

    Like post reads, these degrade to empty results on backend failure.
    """

    def __init__(
        self, category_repository: CategoryRepository, tag_repository: TagRepository
    ) -> None:
        """Initialize taxonomy service.

        Args:
            category_repository: Category repository
            tag_repository: Tag repository
        """
        self.category_repository = category_repository
        self.tag_repository = tag_repository

    async def list_categories(self) -> list[Category]:
        """List active categories, busiest first."""
        with logfire.span("taxonomy_service.list_categories"):
            try:
                categories = await self.category_repository.find_active()
            except BackendError as e:
                logfire.error(
                    "Category listing failed", operation=e.operation, error=e.detail
                )
                return []
            logfire.info("Categories listed", count=len(categories))
            return categories

    async def get_category(self, slug: str) -> Category | None:
        """Get an active category by slug."""
        parsed = Slug.parse(slug)
        if parsed is None:
            logfire.warn("Malformed category slug", slug=slug)
            return None
        slug = parsed.root
        with logfire.span("taxonomy_service.get_category", slug=slug):
            try:
                category = await self.category_repository.find_active_by_slug(slug)
            except BackendError as e:
                logfire.error(
                    "Category lookup failed",
                    operation=e.operation,
                    error=e.detail,
                    slug=slug,
                )
                return None
            if not category:
                logfire.warn("Category not found", slug=slug)
            return category

    async def list_tags(self) -> list[Tag]:
        """List tags, most used first."""
        with logfire.span("taxonomy_service.list_tags"):
            try:
                tags = await self.tag_repository.find_all()
            except BackendError as e:
                logfire.error("Tag listing failed", operation=e.operation, error=e.detail)
                return []
            logfire.info("Tags listed", count=len(tags))
            return tags

    async def get_tag(self, slug: str) -> Tag | None:
        """Get a tag by slug."""
        parsed = Slug.parse(slug)
        if parsed is None:
            logfire.warn("Malformed tag slug", slug=slug)
            return None
        slug = parsed.root
        with logfire.span("taxonomy_service.get_tag", slug=slug):
            try:
                tag = await self.tag_repository.find_by_slug(slug)
            except BackendError as e:
                logfire.error(
                    "Tag lookup failed", operation=e.operation, error=e.detail, slug=slug
                )
                return None
            if not tag:
                logfire.warn("Tag not found", slug=slug)
            return tag
