"""Search domain service."""

from collections.abc import AsyncIterator
from datetime import datetime, timezone

import logfire

from blogcraft.config import SearchSettings
from blogcraft.domain.error import BackendError
from blogcraft.domain.model.post import PostRecord, SearchResult
from blogcraft.domain.repository import PostRepository
from blogcraft.domain.value import SearchTerm

from .base import Service
from .view_assembler import ViewAssembler


class SearchService(Service):
    """Free-text search over published posts.

    A post matches when its title, content or any tag name contains the
    term, ignoring case. Hits are ranked by SearchTerm.relevance, then by
    published_at descending.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        view_assembler: ViewAssembler,
        search_settings: SearchSettings,
    ) -> None:
        """Initialize search service.

        Args:
            post_repository: Post repository
            view_assembler: Shapes search hits
            search_settings: Result limits
        """
        self.post_repository = post_repository
        self.view_assembler = view_assembler
        self.search_settings = search_settings

    def clamp_limit(self, limit: int | None) -> int:
        """Clamp a requested result count to the configured bounds."""
        if limit is None:
            return self.search_settings.default_limit
        return max(1, min(limit, self.search_settings.max_limit))

    async def search(
        self, query: str | None, limit: int | None = None
    ) -> AsyncIterator[SearchResult]:
        """Search published posts.

        Blank and over-long queries yield nothing and never reach the
        repository.

        Args:
            query: Raw search text from the reader
            limit: Maximum number of results

        Yields:
            Search results in rank order, at most limit of them
        """
        term = SearchTerm.parse(query)
        if term is None:
            logfire.debug("Blank or over-long search query ignored")
            return

        max_results = self.clamp_limit(limit)
        records = await self._fetch(term, max_results)

        yielded = 0
        for record in records:
            if yielded >= max_results:
                break
            if not term.matches(record.title, record.content, record.tag_names):
                logfire.warn(
                    "Dropping search hit that does not contain the term",
                    post_id=record.id,
                    term=term.root,
                )
                continue
            yield self.view_assembler.assemble_search_result(record)
            yielded += 1

    async def _fetch(self, term: SearchTerm, limit: int) -> list[PostRecord]:
        with logfire.span("search_service.search", term=term.root, limit=limit):
            try:
                records = await self.post_repository.search(
                    term, published_before=datetime.now(timezone.utc), limit=limit
                )
            except BackendError as e:
                logfire.error(
                    "Search failed",
                    operation=e.operation,
                    error=e.detail,
                    term=term.root,
                    limit=limit,
                )
                return []

            logfire.info("Search completed", term=term.root, count=len(records))
            return records
