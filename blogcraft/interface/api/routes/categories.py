"""Category routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from blogcraft.application.usecase.taxonomy import (
    CategoryPostsResponse,
    GetCategoryRequest,
    GetCategoryUseCase,
    ListCategoriesResponse,
    ListCategoriesUseCase,
    ListCategoryPostsUseCase,
    TaxonomyPostsRequest,
)
from blogcraft.domain.model import Category

router = APIRouter(prefix="/categories", tags=["categories"], route_class=DishkaRoute)


@router.get("", response_model=ListCategoriesResponse)
async def list_categories(
    use_case: FromDishka[ListCategoriesUseCase],
) -> ListCategoriesResponse:
    """List active categories, busiest first."""
    return await use_case.execute()


@router.get("/{slug}", response_model=Category)
async def get_category(
    slug: str,
    use_case: FromDishka[GetCategoryUseCase],
) -> Category:
    """Get an active category by slug.

    Raises:
        HTTPException: 404 if no active category has this slug
    """
    category = await use_case.execute(GetCategoryRequest(slug=slug))
    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )
    return category


@router.get("/{slug}/posts", response_model=CategoryPostsResponse)
async def list_category_posts(
    slug: str,
    use_case: FromDishka[ListCategoryPostsUseCase],
    limit: int | None = None,
    offset: int = 0,
) -> CategoryPostsResponse:
    """List the published posts in a category, newest first.

    Example:
        GET /categories/science/posts?limit=10
    """
    result = await use_case.execute(
        TaxonomyPostsRequest(slug=slug, limit=limit, offset=offset)
    )
    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )
    return result
