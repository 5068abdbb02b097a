"""Unit tests for settings and observability setup."""

import pytest

from blogcraft.config import Settings
from blogcraft.util.error import ConfigurationError
from blogcraft.util.observability import configure_logfire


class TestSettings:
    """Tests for URL derivation in Settings."""

    def test_development_urls(self):
        settings = Settings(environment="development", host="localhost", port=9000)

        assert settings.api.protocol == "http"
        assert settings.api.site_url == "http://localhost:5173"

    def test_production_urls(self):
        settings = Settings(
            environment="production",
            host="api.blog.example",
            site_host="blog.example",
        )

        assert settings.api.protocol == "https"
        assert settings.api.site_url == "https://blog.example"

    def test_nested_env_override(self, monkeypatch):
        monkeypatch.setenv("CONTENT__MAX_PAGE_SIZE", "25")
        monkeypatch.setenv("SEO__RECENT_DAYS", "3")

        settings = Settings()

        assert settings.content.max_page_size == 25
        assert settings.seo.recent_days == 3


class TestConfigureLogfire:
    """Tests for configure_logfire."""

    def test_forced_sending_without_token_fails(self):
        settings = Settings()
        settings.observability.send_to_logfire = True
        settings.observability.logfire_token = None

        with pytest.raises(ConfigurationError):
            configure_logfire(settings)
