"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from blogcraft.application.usecase.comment import (
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
)
from blogcraft.domain.error import BackendError, NotFoundError, ValidationError

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class SubmitCommentAPIRequest(BaseModel):
    """API request for submitting a comment.

    Field rules are enforced by the domain so that every rejection carries
    the offending field name.
    """

    author_name: str = ""
    author_email: str = ""
    content: str = ""


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: int,
    use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get the approved comments on a post, oldest first."""
    return await use_case.execute(GetCommentsRequest(post_id=post_id))


@router.post(
    "/{post_id}/comments",
    response_model=SubmitCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_comment(
    post_id: int,
    request: SubmitCommentAPIRequest,
    use_case: FromDishka[SubmitCommentUseCase],
) -> SubmitCommentResponse:
    """Submit a comment for moderation.

    Args:
        post_id: Post being commented on
        request: Reader's name, email and comment
        use_case: Submit comment use case (injected)

    Returns:
        The pending comment

    Raises:
        HTTPException: 422 with {"field", "message"} if a field is invalid,
            404 if the post is not published, 503 if the comment could not
            be stored
    """
    try:
        return await use_case.execute(
            SubmitCommentRequest(
                post_id=post_id,
                author_name=request.author_name,
                author_email=request.author_email,
                content=request.content,
            )
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"field": e.field, "message": e.message},
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except BackendError as e:
        logfire.error(
            "Comment submission failed", post_id=post_id, operation=e.operation
        )
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Your comment could not be saved right now. Please try again later.",
        )
