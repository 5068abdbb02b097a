"""Search routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from blogcraft.application.usecase.search import (
    SearchPostsRequest,
    SearchPostsResponse,
    SearchPostsUseCase,
)

router = APIRouter(tags=["search"], route_class=DishkaRoute)


@router.get(
    "/search",
    response_model=SearchPostsResponse,
    summary="Search published posts",
    description="Case-insensitive match on title, content and tag names.",
)
async def search_posts(
    use_case: FromDishka[SearchPostsUseCase],
    q: str | None = None,
    limit: int | None = None,
) -> SearchPostsResponse:
    """Search published posts.

    Args:
        use_case: Search use case (injected)
        q: Search text; blank returns no results
        limit: Maximum results, clamped to the configured maximum

    Example:
        GET /search?q=python&limit=5
    """
    with logfire.span("api.search_posts", q=q, limit=limit):
        return await use_case.execute(SearchPostsRequest(q=q, limit=limit))
