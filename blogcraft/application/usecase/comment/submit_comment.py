"""Submit comment use case."""

from datetime import datetime

from pydantic import BaseModel

from blogcraft.domain.service import CommentService, PostService
from blogcraft.domain.value import CommentStatus, PostId


class SubmitCommentRequest(BaseModel):
    """Submit comment request.

    Fields default to empty so that a missing field is reported by the
    domain validation with its field name.
    """

    post_id: int
    author_name: str = ""
    author_email: str = ""
    content: str = ""


class SubmitCommentResponse(BaseModel):
    """Submit comment response."""

    comment_id: int
    post_id: int
    status: CommentStatus
    created_at: datetime
    message: str = "Comment submitted and awaiting moderation"


class SubmitCommentUseCase:
    """Use case for a reader submitting a comment for moderation."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize submit comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: SubmitCommentRequest) -> SubmitCommentResponse:
        """Execute submit comment flow.

        Steps:
        1. Verify the post is published via post service
        2. Validate and store the comment as pending via comment service

        Args:
            request: Submit comment request

        Returns:
            The stored comment's id and status

        Raises:
            NotFoundError: If the post is not published
            ValidationError: If a field is missing or malformed
            BackendError: If the post lookup or the insert fails
        """
        post_id = PostId(request.post_id)

        await self.post_service.require_published(post_id)

        comment = await self.comment_service.submit_comment(
            post_id=post_id,
            author_name=request.author_name,
            author_email=request.author_email,
            content=request.content,
        )

        return SubmitCommentResponse(
            comment_id=comment.id,
            post_id=comment.post_id,
            status=comment.status,
            created_at=comment.created_at,
        )
