"""View counting."""

import logfire

from blogcraft.domain.error import BackendError
from blogcraft.domain.repository import PostRepository
from blogcraft.domain.value import PostId

from .base import Service


class ViewCounter(Service):
    """Best-effort post view counter.

    Each call adds one view; repeated page loads each count. Failures are
    logged and never reach the caller.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize view counter.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def record_view(self, post_id: PostId) -> None:
        """Increment a post's view counter, swallowing failures.

        Args:
            post_id: Post ID
        """
        with logfire.span("view_counter.record_view", post_id=post_id):
            try:
                await self.post_repository.increment_views(post_id)
            except BackendError as e:
                logfire.warn(
                    "View increment failed",
                    post_id=post_id,
                    operation=e.operation,
                    error=e.detail,
                )
                return

            logfire.debug("View recorded", post_id=post_id)
