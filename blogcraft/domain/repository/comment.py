"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List

from blogcraft.domain.model.comment import Comment, NewComment
from blogcraft.domain.value import PostId


class CommentRepository(ABC):
    """Repository for comments. Raises BackendError on backend failure."""

    @abstractmethod
    async def find_approved_by_post(self, post_id: PostId) -> List[Comment]:
        """Find approved comments for a post.

        Args:
            post_id: The post ID

        Returns:
            Approved comments ordered by created_at ASC, id ASC
        """
        pass

    @abstractmethod
    async def insert(self, comment: NewComment) -> Comment:
        """Insert a new comment.

        Args:
            comment: Validated submission

        Returns:
            The stored comment with id and timestamps assigned
        """
        pass
