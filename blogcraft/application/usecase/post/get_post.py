"""Get post use case."""

from typing import Optional

from pydantic import BaseModel

from blogcraft.domain.model import Post
from blogcraft.domain.service import PostService
from blogcraft.domain.value import PostId

from ..base import BaseUseCase


class GetPostRequest(BaseModel):
    """Get post request.

    Accepts either post_id or slug for lookup.
    """

    post_id: int | None = None
    slug: str | None = None

    def model_post_init(self, __context):
        """Validate that either post_id or slug is provided."""
        if self.post_id is None and not self.slug:
            raise ValueError("Either post_id or slug must be provided")
        if self.post_id is not None and self.slug:
            raise ValueError("Provide either post_id or slug, not both")


class GetPostResponse(BaseModel):
    """Get post response."""

    post: Post


class GetPostUseCase(BaseUseCase[GetPostRequest, Optional[GetPostResponse]]):
    """Use case for retrieving a single published post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> Optional[GetPostResponse]:
        """Execute get post flow.

        Args:
            request: Post ID or slug

        Returns:
            Post details if found and published, None otherwise
        """
        if request.slug:
            post = await self.post_service.get_post_by_slug(request.slug)
        else:
            post = await self.post_service.get_post_by_id(PostId(request.post_id))

        if not post:
            return None

        return GetPostResponse(post=post)
