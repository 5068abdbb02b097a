"""List categories use case."""

from pydantic import BaseModel

from blogcraft.domain.model import Category
from blogcraft.domain.service import TaxonomyService


class ListCategoriesResponse(BaseModel):
    """List categories response."""

    categories: list[Category]


class ListCategoriesUseCase:
    """Use case for the active category directory."""

    def __init__(self, taxonomy_service: TaxonomyService) -> None:
        """Initialize list categories use case.

        Args:
            taxonomy_service: Taxonomy domain service
        """
        self.taxonomy_service = taxonomy_service

    async def execute(self) -> ListCategoriesResponse:
        """Execute list categories flow.

        Returns:
            Active categories ordered by post count, then name
        """
        categories = await self.taxonomy_service.list_categories()
        return ListCategoriesResponse(categories=categories)
