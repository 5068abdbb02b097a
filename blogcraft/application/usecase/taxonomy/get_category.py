"""Get category use case."""

from typing import Optional

from pydantic import BaseModel

from blogcraft.domain.model import Category
from blogcraft.domain.service import TaxonomyService


class GetCategoryRequest(BaseModel):
    """Get category request."""

    slug: str


class GetCategoryUseCase:
    """Use case for looking up one active category."""

    def __init__(self, taxonomy_service: TaxonomyService) -> None:
        self.taxonomy_service = taxonomy_service

    async def execute(self, request: GetCategoryRequest) -> Optional[Category]:
        """Return the active category with this slug, or None."""
        return await self.taxonomy_service.get_category(request.slug)
