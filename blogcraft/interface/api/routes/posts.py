"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, BackgroundTasks, HTTPException, status
from pydantic import BaseModel

from blogcraft.application.usecase.post import (
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    RecordViewRequest,
    RecordViewUseCase,
)

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class ViewAcceptedResponse(BaseModel):
    """Response for a queued view increment."""

    post_id: int
    status: str = "accepted"


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    use_case: FromDishka[ListPostsUseCase],
    limit: int | None = None,
    offset: int = 0,
) -> ListPostsResponse:
    """List published posts, newest first.

    Args:
        use_case: List posts use case (injected)
        limit: Page size, clamped to the configured maximum
        offset: Number of posts to skip

    Returns:
        One page of posts

    Example:
        GET /posts?limit=10&offset=20
    """
    with logfire.span("api.list_posts", limit=limit, offset=offset):
        return await use_case.execute(ListPostsRequest(limit=limit, offset=offset))


@router.get("/id/{post_id}", response_model=GetPostResponse)
async def get_post_by_id(
    post_id: int,
    use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a published post by ID.

    Raises:
        HTTPException: 404 if the post does not exist or is not published
    """
    result = await use_case.execute(GetPostRequest(post_id=post_id))
    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return result


@router.get("/{slug}", response_model=GetPostResponse)
async def get_post(
    slug: str,
    use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a published post by slug.

    Args:
        slug: Post slug
        use_case: Get post use case (injected)

    Returns:
        Post with author, category and tags

    Raises:
        HTTPException: 404 if the post does not exist or is not published
    """
    result = await use_case.execute(GetPostRequest(slug=slug))
    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return result


@router.post(
    "/{post_id}/views",
    response_model=ViewAcceptedResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def record_view(
    post_id: int,
    background_tasks: BackgroundTasks,
    use_case: FromDishka[RecordViewUseCase],
) -> ViewAcceptedResponse:
    """Count one view of a post.

    Answers immediately; the increment runs after the response is sent and
    its failures are only logged.
    """
    background_tasks.add_task(use_case.execute, RecordViewRequest(post_id=post_id))
    return ViewAcceptedResponse(post_id=post_id)
