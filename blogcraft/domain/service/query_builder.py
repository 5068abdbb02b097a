"""Query builder: turns reader view intents into canonical post filters."""

from datetime import datetime, timezone

from blogcraft.config import ContentSettings
from blogcraft.domain.repository.query import PostQuery, ViewIntent, ViewKind
from blogcraft.domain.value import PostStatus

from .base import Service


class QueryBuilder(Service):
    """Composes PostQuery filters for public views.

    Every query it builds is restricted to published posts whose
    published_at is not in the future.
    """

    def __init__(self, content_settings: ContentSettings) -> None:
        """Initialize query builder.

        Args:
            content_settings: Page size limits
        """
        self.content_settings = content_settings

    def build(self, intent: ViewIntent, now: datetime | None = None) -> PostQuery:
        """Build the canonical filter for a view.

        Args:
            intent: Requested view and pagination window
            now: Visibility cutoff (defaults to the current UTC time)

        Returns:
            PostQuery for the repository
        """
        cutoff = now or datetime.now(timezone.utc)

        if intent.kind.is_single:
            limit, offset = 1, 0
        else:
            limit, offset = self.clamp_window(intent.limit, intent.offset)

        filters: dict[str, object] = {}
        if intent.kind == ViewKind.BY_CATEGORY:
            filters["category_slug"] = intent.slug.root
        elif intent.kind == ViewKind.BY_TAG:
            filters["tag_slug"] = intent.slug.root
        elif intent.kind == ViewKind.BY_SLUG:
            filters["slug"] = intent.slug.root
        elif intent.kind == ViewKind.BY_ID:
            filters["post_id"] = intent.post_id

        return PostQuery(
            status=PostStatus.PUBLISHED,
            published_before=cutoff,
            limit=limit,
            offset=offset,
            **filters,
        )

    def clamp_window(self, limit: int | None, offset: int) -> tuple[int, int]:
        """Clamp a pagination window to the configured bounds."""
        if limit is None:
            limit = self.content_settings.default_page_size
        limit = max(1, min(limit, self.content_settings.max_page_size))
        return limit, max(0, offset)
