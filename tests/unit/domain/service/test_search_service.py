"""Unit tests for SearchService."""

from unittest.mock import AsyncMock

import pytest

from blogcraft.config import SearchSettings
from blogcraft.domain.error import BackendError
from blogcraft.domain.repository import PostRepository
from blogcraft.domain.service import SearchService, ViewAssembler
from blogcraft.domain.value import PostStatus
from blogcraft.persistence.repository.inmemory import InMemoryContentStore
from tests.conftest import make_category, make_post, make_tag
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def collect(service: SearchService, query, limit=None) -> list:
    return [result async for result in service.search(query, limit)]


class TestSearch:
    """Tests for search method."""

    @pytest.mark.asyncio
    async def test_every_result_contains_the_query(self, unit_env):
        store = await unit_env.get(InMemoryContentStore)
        python = store.add_tag(make_tag(1, "Python"))
        store.add_post(make_post(1, "Intro to Python"))
        store.add_post(make_post(2, "Web apps", tags=[python]))
        store.add_post(make_post(3, "Notes", content="<p>I like PYTHON</p>"))
        store.add_post(make_post(4, "Gardening", content="<p>Tomatoes</p>"))
        search_service = await unit_env.get(SearchService)

        results = await collect(search_service, "python")

        assert {r.slug for r in results} == {"intro-to-python", "web-apps", "notes"}

    @pytest.mark.asyncio
    async def test_ranked_by_relevance_then_recency(self, unit_env):
        store = await unit_env.get(InMemoryContentStore)
        rust = store.add_tag(make_tag(1, "Rust"))
        store.add_post(make_post(1, "Rust basics"))  # title, older
        store.add_post(make_post(2, "Other", content="rust inside"))  # content
        store.add_post(make_post(3, "Systems", tags=[rust]))  # tag
        store.add_post(make_post(4, "Rust advanced"))  # title, newer
        search_service = await unit_env.get(SearchService)

        results = await collect(search_service, "rust")

        assert [r.id for r in results] == [4, 1, 3, 2]

    @pytest.mark.asyncio
    async def test_blank_query_never_reaches_repository(self):
        repository = AsyncMock(spec=PostRepository)
        search_service = SearchService(repository, ViewAssembler(), SearchSettings())

        assert await collect(search_service, "") == []
        assert await collect(search_service, "   ") == []
        assert await collect(search_service, None) == []
        repository.search.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unpublished_posts_excluded(self, unit_env):
        store = await unit_env.get(InMemoryContentStore)
        store.add_post(make_post(1, "Draft about go", status=PostStatus.DRAFT))
        store.add_post(make_post(2, "Archived go", status=PostStatus.ARCHIVED))
        search_service = await unit_env.get(SearchService)

        assert await collect(search_service, "go") == []

    @pytest.mark.asyncio
    async def test_limit_truncates(self, unit_env):
        store = await unit_env.get(InMemoryContentStore)
        for post_id in range(1, 8):
            store.add_post(make_post(post_id, f"Kotlin part {post_id}"))
        search_service = await unit_env.get(SearchService)

        results = await collect(search_service, "kotlin", limit=3)

        assert len(results) == 3

    @pytest.mark.asyncio
    async def test_like_wildcards_match_literally(self, unit_env):
        store = await unit_env.get(InMemoryContentStore)
        store.add_post(make_post(1, "snake_case naming"))
        store.add_post(make_post(2, "snakeXcase naming"))
        search_service = await unit_env.get(SearchService)

        results = await collect(search_service, "snake_case")

        assert [r.id for r in results] == [1]

    @pytest.mark.asyncio
    async def test_result_shape(self, unit_env):
        store = await unit_env.get(InMemoryContentStore)
        science = store.add_category(make_category(1, "Science"))
        store.add_post(make_post(1, "Physics", category=science, excerpt="Short."))
        search_service = await unit_env.get(SearchService)

        [result] = await collect(search_service, "physics")

        assert result.excerpt == "Short."
        assert result.category is not None
        assert (result.category.name, result.category.slug) == ("Science", "science")

    @pytest.mark.asyncio
    async def test_hits_without_the_term_are_dropped(self):
        repository = AsyncMock(spec=PostRepository)
        repository.search.return_value = [
            make_post(1, "Matches zig"),
            make_post(2, "Unrelated"),
        ]
        search_service = SearchService(repository, ViewAssembler(), SearchSettings())

        results = await collect(search_service, "zig")

        assert [r.id for r in results] == [1]

    @pytest.mark.asyncio
    async def test_backend_failure_ends_stream_empty(self):
        repository = AsyncMock(spec=PostRepository)
        repository.search.side_effect = BackendError("posts.search", "boom")
        search_service = SearchService(repository, ViewAssembler(), SearchSettings())

        assert await collect(search_service, "anything") == []

    @pytest.mark.asyncio
    async def test_overlong_query_ends_stream_empty(self):
        repository = AsyncMock(spec=PostRepository)
        search_service = SearchService(repository, ViewAssembler(), SearchSettings())

        assert await collect(search_service, "y" * 201) == []
        repository.search.assert_not_awaited()


class TestClampLimit:
    """Tests for clamp_limit method."""

    def test_bounds(self):
        search_service = SearchService(
            AsyncMock(spec=PostRepository),
            ViewAssembler(),
            SearchSettings(default_limit=10, max_limit=50),
        )

        assert search_service.clamp_limit(None) == 10
        assert search_service.clamp_limit(0) == 1
        assert search_service.clamp_limit(500) == 50
        assert search_service.clamp_limit(7) == 7
