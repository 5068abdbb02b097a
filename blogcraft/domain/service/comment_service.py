"""Comment domain service."""

import logfire
from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from blogcraft.config import ContentSettings
from blogcraft.domain.error import BackendError, ValidationError
from blogcraft.domain.model.comment import Comment, NewComment
from blogcraft.domain.repository import CommentRepository
from blogcraft.domain.value import PostId

from .base import Service

# Syntax only; pydantic does not check deliverability
_email_adapter = TypeAdapter(EmailStr)

AUTHOR_NAME_MAX_LENGTH = 100
AUTHOR_EMAIL_MAX_LENGTH = 255


class CommentService(Service):
    """Domain service for reader comments."""

    def __init__(
        self, comment_repository: CommentRepository, content_settings: ContentSettings
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            content_settings: Comment length limit
        """
        self.comment_repository = comment_repository
        self.content_settings = content_settings

    async def get_approved_comments(self, post_id: PostId) -> list[Comment]:
        """Get the approved comments for a post, oldest first.

        Returns an empty list if the backend fails.

        Args:
            post_id: Post ID

        Returns:
            Approved comments
        """
        with logfire.span("comment_service.get_approved_comments", post_id=post_id):
            try:
                comments = await self.comment_repository.find_approved_by_post(post_id)
            except BackendError as e:
                logfire.error(
                    "Comment listing failed",
                    operation=e.operation,
                    error=e.detail,
                    post_id=post_id,
                )
                return []

            logfire.info("Comments retrieved", post_id=post_id, count=len(comments))
            return comments

    def validate_submission(
        self, post_id: PostId, author_name: str, author_email: str, content: str
    ) -> NewComment:
        """Validate and normalize a comment submission.

        Raises:
            ValidationError: Naming the first field that fails
        """
        author_name = author_name.strip()
        author_email = author_email.strip()
        content = content.strip()

        if not author_name:
            raise ValidationError("author_name", "Name is required")
        if len(author_name) > AUTHOR_NAME_MAX_LENGTH:
            raise ValidationError(
                "author_name",
                f"Name must be at most {AUTHOR_NAME_MAX_LENGTH} characters",
            )

        if not author_email:
            raise ValidationError("author_email", "Email is required")
        if len(author_email) > AUTHOR_EMAIL_MAX_LENGTH:
            raise ValidationError("author_email", "Email address is too long")
        try:
            author_email = _email_adapter.validate_python(author_email)
        except PydanticValidationError as e:
            raise ValidationError("author_email", "Email address is not valid") from e

        if not content:
            raise ValidationError("content", "Comment must not be empty")
        max_length = self.content_settings.comment_max_length
        if len(content) > max_length:
            raise ValidationError(
                "content", f"Comment must be at most {max_length} characters"
            )

        return NewComment(
            post_id=post_id,
            author_name=author_name,
            author_email=author_email,
            content=content,
        )

    async def submit_comment(
        self, post_id: PostId, author_name: str, author_email: str, content: str
    ) -> Comment:
        """Validate a comment and store it as pending.

        Nothing is written when validation fails.

        Args:
            post_id: Post being commented on
            author_name: Reader's name
            author_email: Reader's email
            content: Comment body

        Returns:
            The stored pending comment

        Raises:
            ValidationError: If a field is missing or malformed
            BackendError: If the insert fails
        """
        with logfire.span("comment_service.submit_comment", post_id=post_id):
            try:
                new_comment = self.validate_submission(
                    post_id, author_name, author_email, content
                )
            except ValidationError as e:
                logfire.info(
                    "Comment rejected", post_id=post_id, field=e.field, reason=e.message
                )
                raise

            try:
                comment = await self.comment_repository.insert(new_comment)
            except BackendError as e:
                logfire.error(
                    "Comment insert failed",
                    post_id=post_id,
                    operation=e.operation,
                    error=e.detail,
                )
                raise

            logfire.info(
                "Comment submitted",
                comment_id=comment.id,
                post_id=post_id,
                status=comment.status.value,
            )
            return comment
