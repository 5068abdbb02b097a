"""Sitemap use case."""

from datetime import date, datetime, timedelta, timezone
from typing import NamedTuple
from xml.etree import ElementTree as ET

import logfire
from pydantic import BaseModel

from blogcraft.config import Settings
from blogcraft.domain.model import Post
from blogcraft.domain.repository import ViewIntent
from blogcraft.domain.service import PostService, QueryBuilder, TaxonomyService

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


class SitemapEntry(NamedTuple):
    """One <url> element."""

    path: str
    lastmod: date
    changefreq: str
    priority: str


class BuildSitemapRequest(BaseModel):
    """Build sitemap request.

    now defaults to the current UTC time; it decides which posts count as
    recent and the lastmod of static pages.
    """

    now: datetime | None = None


class BuildSitemapUseCase:
    """Use case for rendering sitemap.xml for the public blog."""

    def __init__(
        self,
        taxonomy_service: TaxonomyService,
        post_service: PostService,
        query_builder: QueryBuilder,
        settings: Settings,
    ) -> None:
        """Initialize sitemap use case.

        Args:
            taxonomy_service: Category and tag directories
            post_service: Published posts
            query_builder: Page size bounds for walking all posts
            settings: Site URL and sitemap limits
        """
        self.taxonomy_service = taxonomy_service
        self.post_service = post_service
        self.query_builder = query_builder
        self.settings = settings

    async def execute(self, request: BuildSitemapRequest) -> str:
        """Execute sitemap flow.

        Args:
            request: Optional reference time

        Returns:
            sitemap.xml document
        """
        now = request.now or datetime.now(timezone.utc)
        today = now.date()

        with logfire.span("build_sitemap.execute"):
            entries = [
                SitemapEntry("/blog", today, "daily", "1.0"),
                SitemapEntry("/blog/categories", today, "weekly", "0.8"),
                SitemapEntry("/blog/tags", today, "weekly", "0.8"),
                SitemapEntry("/blog/about", today, "monthly", "0.8"),
            ]

            for category in await self.taxonomy_service.list_categories():
                lastmod = (category.updated_at or now).date()
                entries.append(
                    SitemapEntry(
                        f"/blog/category/{category.slug}", lastmod, "weekly", "0.7"
                    )
                )

            for tag in await self.taxonomy_service.list_tags():
                entries.append(SitemapEntry(f"/blog/tag/{tag.slug}", today, "weekly", "0.7"))

            recent_cutoff = now - timedelta(days=self.settings.seo.recent_days)
            posts = await self._published_posts()
            for post in posts:
                entries.append(self._post_entry(post, recent_cutoff, today))

            logfire.info("Sitemap built", entries=len(entries), posts=len(posts))
            return self.render(entries)

    async def _published_posts(self) -> list[Post]:
        """Walk published posts newest first, up to the sitemap limit."""
        post_limit = self.settings.seo.sitemap_post_limit
        page_size, _ = self.query_builder.clamp_window(
            self.settings.content.max_page_size, 0
        )

        posts: list[Post] = []
        while len(posts) < post_limit:
            limit = min(page_size, post_limit - len(posts))
            page = await self.post_service.list_posts(
                ViewIntent.all_published(limit=limit, offset=len(posts))
            )
            posts.extend(page)
            if len(page) < limit:
                break
        return posts

    @staticmethod
    def _post_entry(post: Post, recent_cutoff: datetime, today: date) -> SitemapEntry:
        recent = post.published_at is not None and post.published_at > recent_cutoff
        modified = post.updated_at or post.published_at
        return SitemapEntry(
            f"/blog/post/{post.slug}",
            modified.date() if modified else today,
            "daily" if recent else "monthly",
            "0.8",
        )

    def render(self, entries: list[SitemapEntry]) -> str:
        """Render entries as a sitemap urlset document."""
        site_url = self.settings.api.site_url.rstrip("/")

        urlset = ET.Element("urlset", xmlns=SITEMAP_NAMESPACE)
        for entry in entries:
            url = ET.SubElement(urlset, "url")
            ET.SubElement(url, "loc").text = f"{site_url}{entry.path}"
            ET.SubElement(url, "lastmod").text = entry.lastmod.isoformat()
            ET.SubElement(url, "changefreq").text = entry.changefreq
            ET.SubElement(url, "priority").text = entry.priority
        ET.indent(urlset)

        return XML_DECLARATION + ET.tostring(urlset, encoding="unicode") + "\n"
