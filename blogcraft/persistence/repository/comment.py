"""PostgreSQL implementation of Comment repository."""

from typing import List

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from blogcraft.domain.model import Comment, NewComment
from blogcraft.domain.repository import CommentRepository
from blogcraft.domain.value import CommentStatus, PostId
from blogcraft.persistence.error import backend_operation
from blogcraft.persistence.mappers import new_comment_to_dict, row_to_comment
from blogcraft.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_approved_by_post(self, post_id: PostId) -> List[Comment]:
        """Find approved comments for a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(
                comments_table.c.post_id == post_id,
                comments_table.c.status == CommentStatus.APPROVED.value,
            )
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        with backend_operation("comments.find_approved_by_post"):
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def insert(self, comment: NewComment) -> Comment:
        """Insert a comment and return the stored row."""
        stmt = (
            insert(comments_table)
            .values(**new_comment_to_dict(comment))
            .returning(comments_table)
        )
        with backend_operation("comments.insert"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        return row_to_comment(row._asdict())
