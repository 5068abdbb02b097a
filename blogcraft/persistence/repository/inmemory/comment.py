"""In-memory comment repository for testing."""

from blogcraft.domain.model.comment import Comment, NewComment
from blogcraft.domain.repository.comment import CommentRepository
from blogcraft.domain.value import CommentStatus, PostId

from .store import InMemoryContentStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryContentStore) -> None:
        self._store = store

    async def find_approved_by_post(self, post_id: PostId) -> list[Comment]:
        """Find approved comments for a post, oldest first."""
        comments = [
            c
            for c in self._store.comments.values()
            if c.post_id == post_id and c.status == CommentStatus.APPROVED
        ]
        return sorted(comments, key=lambda c: (c.created_at, c.id))

    async def insert(self, comment: NewComment) -> Comment:
        """Insert a comment and return the stored row."""
        return self._store.store_new_comment(comment)
