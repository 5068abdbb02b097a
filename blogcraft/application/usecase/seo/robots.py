"""robots.txt use case."""

from blogcraft.config import Settings

# Crawlers we want on the blog; everyone else gets the same rules via "*"
ALLOWED_CRAWLERS = ("Googlebot", "Bingbot", "Twitterbot", "facebookexternalhit")


class BuildRobotsTxtUseCase:
    """Use case for rendering robots.txt."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    async def execute(self) -> str:
        """Render robots.txt pointing crawlers at the sitemap."""
        site_url = self.settings.api.site_url.rstrip("/")

        lines: list[str] = []
        for crawler in ALLOWED_CRAWLERS:
            lines += [f"User-agent: {crawler}", "Allow: /", "Disallow: /admin/", ""]
        lines += ["User-agent: *", "Allow: /", "Disallow: /admin/", ""]
        lines += [f"Sitemap: {site_url}/sitemap.xml"]

        return "\n".join(lines) + "\n"
