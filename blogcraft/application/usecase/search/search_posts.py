"""Search posts use case."""

import logfire
from pydantic import BaseModel

from blogcraft.domain.model import SearchResult
from blogcraft.domain.service import SearchService


class SearchPostsRequest(BaseModel):
    """Search posts request. A blank query yields no results."""

    q: str | None = None
    limit: int | None = None


class SearchPostsResponse(BaseModel):
    """Search posts response."""

    query: str
    results: list[SearchResult]
    count: int


class SearchPostsUseCase:
    """Use case for free-text search over published posts."""

    def __init__(self, search_service: SearchService) -> None:
        """Initialize search posts use case.

        Args:
            search_service: Search domain service
        """
        self.search_service = search_service

    async def execute(self, request: SearchPostsRequest) -> SearchPostsResponse:
        """Execute search flow.

        Args:
            request: Query text and result limit

        Returns:
            Ranked results, best match first
        """
        query = (request.q or "").strip()
        with logfire.span("search_posts.execute", query=query, limit=request.limit):
            results = [
                result
                async for result in self.search_service.search(query, request.limit)
            ]
            return SearchPostsResponse(query=query, results=results, count=len(results))
