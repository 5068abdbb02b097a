"""List posts use case."""

import logfire
from pydantic import BaseModel

from blogcraft.domain.model import Post
from blogcraft.domain.repository import ViewIntent
from blogcraft.domain.service import PostService, QueryBuilder
from blogcraft.domain.value import Slug

from ..base import BaseUseCase


class ListPostsRequest(BaseModel):
    """List posts request.

    At most one of category_slug and tag_slug narrows the listing.
    limit None means the configured default page size; out-of-range windows
    are clamped rather than rejected.
    """

    category_slug: str | None = None
    tag_slug: str | None = None
    limit: int | None = None
    offset: int = 0

    def model_post_init(self, __context):
        """Validate that the listing is narrowed by at most one taxonomy."""
        if self.category_slug and self.tag_slug:
            raise ValueError("Provide either category_slug or tag_slug, not both")


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[Post]
    limit: int
    offset: int


class ListPostsUseCase(BaseUseCase[ListPostsRequest, ListPostsResponse]):
    """Use case for listing published posts newest first."""

    def __init__(self, post_service: PostService, query_builder: QueryBuilder) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            query_builder: Used to report the effective page window
        """
        self.post_service = post_service
        self.query_builder = query_builder

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Filters and pagination window

        Returns:
            One page of posts with the window actually applied
        """
        limit, offset = self.query_builder.clamp_window(request.limit, request.offset)

        requested = request.category_slug or request.tag_slug
        slug = Slug.parse(requested)
        if requested and slug is None:
            # No stored category or tag can have this slug
            return ListPostsResponse(posts=[], limit=limit, offset=offset)

        if request.category_slug:
            intent = ViewIntent.by_category(slug, limit, offset)
        elif request.tag_slug:
            intent = ViewIntent.by_tag(slug, limit, offset)
        else:
            intent = ViewIntent.all_published(limit, offset)

        with logfire.span("list_posts.execute", kind=intent.kind.value):
            posts = await self.post_service.list_posts(intent)
            return ListPostsResponse(posts=posts, limit=limit, offset=offset)
