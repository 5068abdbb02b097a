"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from blogcraft.config import ContentSettings, SearchSettings, SEOSettings, Settings
from blogcraft.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_content_settings(self, settings: Settings) -> ContentSettings:
        """Provide content listing settings."""
        return settings.content

    @provide(scope=Scope.APP)
    def provide_search_settings(self, settings: Settings) -> SearchSettings:
        """Provide search settings."""
        return settings.search

    @provide(scope=Scope.APP)
    def provide_seo_settings(self, settings: Settings) -> SEOSettings:
        """Provide sitemap settings."""
        return settings.seo
