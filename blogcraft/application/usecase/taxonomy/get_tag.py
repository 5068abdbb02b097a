"""Get tag use case."""

from typing import Optional

from pydantic import BaseModel

from blogcraft.domain.model import Tag
from blogcraft.domain.service import TaxonomyService


class GetTagRequest(BaseModel):
    """Get tag request."""

    slug: str


class GetTagUseCase:
    """Use case for looking up one tag."""

    def __init__(self, taxonomy_service: TaxonomyService) -> None:
        self.taxonomy_service = taxonomy_service

    async def execute(self, request: GetTagRequest) -> Optional[Tag]:
        """Return the tag with this slug, or None."""
        return await self.taxonomy_service.get_tag(request.slug)
