"""Sitemap and robots.txt use cases."""

from .build_sitemap import BuildSitemapRequest, BuildSitemapUseCase, SitemapEntry
from .robots import ALLOWED_CRAWLERS, BuildRobotsTxtUseCase

__all__ = [
    "ALLOWED_CRAWLERS",
    "BuildRobotsTxtUseCase",
    "BuildSitemapRequest",
    "BuildSitemapUseCase",
    "SitemapEntry",
]
