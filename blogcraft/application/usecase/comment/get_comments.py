"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel

from blogcraft.domain.service import CommentService
from blogcraft.domain.value import PostId


class CommentItem(BaseModel):
    """Public view of an approved comment (email withheld)."""

    comment_id: int
    post_id: int
    author_name: str
    content: str
    created_at: datetime


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: int


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentItem]


class GetCommentsUseCase:
    """Use case for retrieving the approved comments on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request with post ID

        Returns:
            Approved comments, oldest first
        """
        comments = await self.comment_service.get_approved_comments(
            PostId(request.post_id)
        )

        return GetCommentsResponse(
            comments=[
                CommentItem(
                    comment_id=comment.id,
                    post_id=comment.post_id,
                    author_name=comment.author_name,
                    content=comment.content,
                    created_at=comment.created_at,
                )
                for comment in comments
            ]
        )
