"""Unit tests for PostService."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest

from blogcraft.config import ContentSettings
from blogcraft.domain.error import BackendError, NotFoundError
from blogcraft.domain.repository import PostRepository, ViewIntent
from blogcraft.domain.service import PostService, QueryBuilder, ViewAssembler
from blogcraft.domain.value import PostId, PostStatus
from blogcraft.persistence.repository.inmemory import InMemoryContentStore
from tests.conftest import NOW, make_category, make_post, make_tag
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


def seed_abcd(store: InMemoryContentStore) -> None:
    """Posts a, b, c published (c newest) and d a draft."""
    store.add_post(make_post(1, "a"))
    store.add_post(make_post(2, "b"))
    store.add_post(make_post(3, "c"))
    store.add_post(make_post(4, "d", status=PostStatus.DRAFT))


class TestListPosts:
    """Tests for list_posts method."""

    @pytest.mark.asyncio
    async def test_published_posts_newest_first(self, unit_env):
        """Drafts are hidden and the newest post comes first."""
        # Arrange
        seed_abcd(await unit_env.get(InMemoryContentStore))
        post_service = await unit_env.get(PostService)

        # Act
        posts = await post_service.list_posts(ViewIntent.all_published())

        # Assert
        assert [p.slug for p in posts] == ["c", "b", "a"]

    @pytest.mark.asyncio
    async def test_future_posts_are_hidden(self, unit_env):
        """A published post dated in the future is not listed yet."""
        store = await unit_env.get(InMemoryContentStore)
        store.add_post(make_post(1, "now"))
        store.add_post(
            make_post(
                2, "later", published_at=datetime.now(timezone.utc) + timedelta(days=1)
            )
        )
        post_service = await unit_env.get(PostService)

        posts = await post_service.list_posts(ViewIntent.all_published())

        assert [p.slug for p in posts] == ["now"]

    @pytest.mark.asyncio
    async def test_equal_publish_times_break_ties_by_id(self, unit_env):
        store = await unit_env.get(InMemoryContentStore)
        for post_id in (5, 3, 4):
            store.add_post(make_post(post_id, f"p{post_id}", published_at=NOW))
        post_service = await unit_env.get(PostService)

        posts = await post_service.list_posts(ViewIntent.all_published())

        assert [p.id for p in posts] == [3, 4, 5]

    @pytest.mark.asyncio
    async def test_pages_are_disjoint_and_concatenate(self, unit_env):
        """Pages (L,0) and (L,L) together equal page (2L,0)."""
        store = await unit_env.get(InMemoryContentStore)
        for post_id in range(1, 12):
            store.add_post(make_post(post_id, f"post {post_id}"))
        post_service = await unit_env.get(PostService)

        first = await post_service.list_posts(ViewIntent.all_published(4, 0))
        second = await post_service.list_posts(ViewIntent.all_published(4, 4))
        both = await post_service.list_posts(ViewIntent.all_published(8, 0))

        assert not {p.id for p in first} & {p.id for p in second}
        assert [p.id for p in first + second] == [p.id for p in both]

    @pytest.mark.asyncio
    async def test_by_category_includes_every_published_post_in_it(self, unit_env):
        store = await unit_env.get(InMemoryContentStore)
        science = store.add_category(make_category(1, "Science"))
        art = store.add_category(make_category(2, "Art"))
        store.add_post(make_post(1, "s1", category=science))
        store.add_post(make_post(2, "a1", category=art))
        store.add_post(make_post(3, "s2", category=science))
        store.add_post(make_post(4, "s3", category=science, status=PostStatus.DRAFT))
        post_service = await unit_env.get(PostService)

        posts = await post_service.list_posts(ViewIntent.by_category("science"))

        assert [p.slug for p in posts] == ["s2", "s1"]
        assert all(p.status == PostStatus.PUBLISHED for p in posts)

    @pytest.mark.asyncio
    async def test_by_tag(self, unit_env):
        store = await unit_env.get(InMemoryContentStore)
        python = store.add_tag(make_tag(1, "Python"))
        store.add_post(make_post(1, "tagged", tags=[python]))
        store.add_post(make_post(2, "untagged"))
        post_service = await unit_env.get(PostService)

        posts = await post_service.list_posts(ViewIntent.by_tag("Python"))

        assert [p.slug for p in posts] == ["tagged"]
        assert posts[0].tags[0].name == "Python"

    @pytest.mark.asyncio
    async def test_backend_failure_degrades_to_empty_list(self):
        repository = AsyncMock(spec=PostRepository)
        repository.find_many.side_effect = BackendError("posts.find_many", "timeout")
        post_service = PostService(
            repository, QueryBuilder(ContentSettings()), ViewAssembler()
        )

        posts = await post_service.list_posts(ViewIntent.all_published())

        assert posts == []
        repository.find_many.assert_awaited_once()


class TestGetPost:
    """Tests for single post lookups."""

    @pytest.mark.asyncio
    async def test_get_by_slug(self, unit_env):
        seed_abcd(await unit_env.get(InMemoryContentStore))
        post_service = await unit_env.get(PostService)

        post = await post_service.get_post_by_slug("b")

        assert post is not None
        assert post.id == 2

    @pytest.mark.asyncio
    async def test_draft_is_absent(self, unit_env):
        seed_abcd(await unit_env.get(InMemoryContentStore))
        post_service = await unit_env.get(PostService)

        assert await post_service.get_post_by_slug("d") is None
        assert await post_service.get_post_by_id(PostId(4)) is None

    @pytest.mark.asyncio
    async def test_get_by_id(self, unit_env):
        seed_abcd(await unit_env.get(InMemoryContentStore))
        post_service = await unit_env.get(PostService)

        post = await post_service.get_post_by_id(PostId(3))

        assert post is not None
        assert post.slug == "c"

    @pytest.mark.asyncio
    async def test_backend_failure_degrades_to_none(self):
        repository = AsyncMock(spec=PostRepository)
        repository.find_one.side_effect = BackendError("posts.find_one", "refused")
        post_service = PostService(
            repository, QueryBuilder(ContentSettings()), ViewAssembler()
        )

        assert await post_service.get_post_by_slug("anything") is None

    @pytest.mark.asyncio
    async def test_slug_lookup_ignores_case(self, unit_env):
        seed_abcd(await unit_env.get(InMemoryContentStore))
        post_service = await unit_env.get(PostService)

        post = await post_service.get_post_by_slug(" B ")

        assert post is not None
        assert post.id == 2

    @pytest.mark.asyncio
    async def test_malformed_slug_is_absent_without_a_query(self):
        repository = AsyncMock(spec=PostRepository)
        post_service = PostService(
            repository, QueryBuilder(ContentSettings()), ViewAssembler()
        )

        assert await post_service.get_post_by_slug("not a slug!") is None
        assert await post_service.get_post_by_slug("double--hyphen") is None
        repository.find_one.assert_not_awaited()


class TestRequirePublished:
    """Tests for the non-degrading lookup used by writes."""

    @pytest.mark.asyncio
    async def test_returns_published_post(self, unit_env):
        seed_abcd(await unit_env.get(InMemoryContentStore))
        post_service = await unit_env.get(PostService)

        post = await post_service.require_published(PostId(3))

        assert post.slug == "c"

    @pytest.mark.asyncio
    async def test_draft_raises_not_found(self, unit_env):
        seed_abcd(await unit_env.get(InMemoryContentStore))
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.require_published(PostId(4))

    @pytest.mark.asyncio
    async def test_backend_failure_propagates(self):
        repository = AsyncMock(spec=PostRepository)
        repository.find_one.side_effect = BackendError("posts.find_one", "refused")
        post_service = PostService(
            repository, QueryBuilder(ContentSettings()), ViewAssembler()
        )

        with pytest.raises(BackendError):
            await post_service.require_published(PostId(1))
