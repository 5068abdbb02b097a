"""List tags use case."""

from pydantic import BaseModel

from blogcraft.domain.model import Tag
from blogcraft.domain.service import TaxonomyService


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[Tag]


class ListTagsUseCase:
    """Use case for listing tags."""

    def __init__(self, taxonomy_service: TaxonomyService) -> None:
        """Initialize list tags use case.

        Args:
            taxonomy_service: Taxonomy domain service
        """
        self.taxonomy_service = taxonomy_service

    async def execute(self) -> ListTagsResponse:
        """Execute list tags flow.

        Returns:
            Tags ordered by post count, then name
        """
        tags = await self.taxonomy_service.list_tags()
        return ListTagsResponse(tags=tags)
