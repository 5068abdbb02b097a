"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from blogcraft.application.usecase.taxonomy import (
    GetTagRequest,
    GetTagUseCase,
    ListTagPostsUseCase,
    ListTagsResponse,
    ListTagsUseCase,
    TagPostsResponse,
    TaxonomyPostsRequest,
)
from blogcraft.domain.model import Tag

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List all tags",
    description="Get all tags, most used first.",
)
async def list_tags(use_case: FromDishka[ListTagsUseCase]) -> ListTagsResponse:
    """List all tags."""
    return await use_case.execute()


@router.get("/{slug}", response_model=Tag)
async def get_tag(slug: str, use_case: FromDishka[GetTagUseCase]) -> Tag:
    """Get a tag by slug.

    Raises:
        HTTPException: 404 if no tag has this slug
    """
    tag = await use_case.execute(GetTagRequest(slug=slug))
    if not tag:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Tag not found",
        )
    return tag


@router.get("/{slug}/posts", response_model=TagPostsResponse)
async def list_tag_posts(
    slug: str,
    use_case: FromDishka[ListTagPostsUseCase],
    limit: int | None = None,
    offset: int = 0,
) -> TagPostsResponse:
    """List the published posts carrying a tag, newest first."""
    result = await use_case.execute(
        TaxonomyPostsRequest(slug=slug, limit=limit, offset=offset)
    )
    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Tag not found",
        )
    return result
