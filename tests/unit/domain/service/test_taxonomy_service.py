"""Unit tests for TaxonomyService."""

from unittest.mock import AsyncMock

import pytest

from blogcraft.domain.error import BackendError
from blogcraft.domain.repository import CategoryRepository, TagRepository
from blogcraft.domain.service import TaxonomyService
from blogcraft.persistence.repository.inmemory import InMemoryContentStore
from tests.conftest import make_category, make_tag
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCategories:
    """Tests for category reads."""

    @pytest.mark.asyncio
    async def test_active_categories_busiest_first(self, unit_env):
        store = await unit_env.get(InMemoryContentStore)
        store.add_category(make_category(1, "Art", posts_count=2))
        store.add_category(make_category(2, "Science", posts_count=9))
        store.add_category(make_category(3, "Biology", posts_count=2))
        store.add_category(make_category(4, "Hidden", posts_count=50, is_active=False))
        taxonomy_service = await unit_env.get(TaxonomyService)

        categories = await taxonomy_service.list_categories()

        assert [c.name for c in categories] == ["Science", "Art", "Biology"]

    @pytest.mark.asyncio
    async def test_inactive_category_not_found_by_slug(self, unit_env):
        store = await unit_env.get(InMemoryContentStore)
        store.add_category(make_category(1, "Hidden", is_active=False))
        store.add_category(make_category(2, "Shown"))
        taxonomy_service = await unit_env.get(TaxonomyService)

        assert await taxonomy_service.get_category("hidden") is None
        shown = await taxonomy_service.get_category(" SHOWN ")
        assert shown is not None
        assert shown.id == 2

    @pytest.mark.asyncio
    async def test_backend_failure_degrades(self):
        categories = AsyncMock(spec=CategoryRepository)
        categories.find_active.side_effect = BackendError("categories", "down")
        categories.find_active_by_slug.side_effect = BackendError("categories", "down")
        taxonomy_service = TaxonomyService(categories, AsyncMock(spec=TagRepository))

        assert await taxonomy_service.list_categories() == []
        assert await taxonomy_service.get_category("science") is None


class TestTags:
    """Tests for tag reads."""

    @pytest.mark.asyncio
    async def test_tags_most_used_first(self, unit_env):
        store = await unit_env.get(InMemoryContentStore)
        store.add_tag(make_tag(1, "go", posts_count=1))
        store.add_tag(make_tag(2, "python", posts_count=4))
        store.add_tag(make_tag(3, "c", posts_count=1))
        taxonomy_service = await unit_env.get(TaxonomyService)

        tags = await taxonomy_service.list_tags()

        assert [t.name for t in tags] == ["python", "c", "go"]

    @pytest.mark.asyncio
    async def test_get_tag_by_slug(self, unit_env):
        store = await unit_env.get(InMemoryContentStore)
        store.add_tag(make_tag(1, "Machine Learning"))
        taxonomy_service = await unit_env.get(TaxonomyService)

        tag = await taxonomy_service.get_tag("machine-learning")

        assert tag is not None
        assert tag.name == "Machine Learning"
        assert await taxonomy_service.get_tag("nope") is None

    @pytest.mark.asyncio
    async def test_backend_failure_degrades(self):
        tags = AsyncMock(spec=TagRepository)
        tags.find_all.side_effect = BackendError("tags", "down")
        taxonomy_service = TaxonomyService(AsyncMock(spec=CategoryRepository), tags)

        assert await taxonomy_service.list_tags() == []
