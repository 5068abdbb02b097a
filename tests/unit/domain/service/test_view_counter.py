"""Unit tests for ViewCounter."""

from unittest.mock import AsyncMock

import pytest

from blogcraft.domain.error import BackendError
from blogcraft.domain.repository import PostRepository
from blogcraft.domain.service import ViewCounter
from blogcraft.domain.value import PostId
from blogcraft.persistence.repository.inmemory import InMemoryContentStore
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRecordView:
    """Tests for record_view method."""

    @pytest.mark.asyncio
    async def test_each_call_adds_one(self, unit_env):
        store = await unit_env.get(InMemoryContentStore)
        store.add_post(make_post(1, "Counted", views=5))
        view_counter = await unit_env.get(ViewCounter)

        await view_counter.record_view(PostId(1))
        await view_counter.record_view(PostId(1))

        assert store.posts[PostId(1)].views == 7

    @pytest.mark.asyncio
    async def test_missing_counter_starts_at_zero(self, unit_env):
        store = await unit_env.get(InMemoryContentStore)
        store.add_post(make_post(1, "Fresh", views=None))
        view_counter = await unit_env.get(ViewCounter)

        await view_counter.record_view(PostId(1))

        assert store.posts[PostId(1)].views == 1

    @pytest.mark.asyncio
    async def test_backend_failure_is_swallowed(self):
        repository = AsyncMock(spec=PostRepository)
        repository.increment_views.side_effect = BackendError("views", "locked")
        view_counter = ViewCounter(repository)

        await view_counter.record_view(PostId(1))

        repository.increment_views.assert_awaited_once_with(PostId(1))
