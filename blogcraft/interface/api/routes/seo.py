"""Sitemap and robots.txt routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response

from blogcraft.application.usecase.seo import (
    BuildRobotsTxtUseCase,
    BuildSitemapRequest,
    BuildSitemapUseCase,
)

router = APIRouter(tags=["seo"], route_class=DishkaRoute)


@router.get("/sitemap.xml", response_class=Response)
async def sitemap(use_case: FromDishka[BuildSitemapUseCase]) -> Response:
    """Sitemap of the public blog."""
    document = await use_case.execute(BuildSitemapRequest())
    return Response(content=document, media_type="application/xml")


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots_txt(use_case: FromDishka[BuildRobotsTxtUseCase]) -> PlainTextResponse:
    """Crawler rules for the public blog."""
    return PlainTextResponse(await use_case.execute())
