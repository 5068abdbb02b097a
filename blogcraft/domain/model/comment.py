"""Comment entity."""

from datetime import datetime

from blogcraft.domain.model.common import DomainModel
from blogcraft.domain.value import CommentId, CommentStatus, PostId


class Comment(DomainModel):
    """Reader comment on a post.

    Author name and email are free text supplied by the reader. New comments
    start as pending; only approved ones are shown publicly.
    """

    id: CommentId
    post_id: PostId
    author_name: str
    author_email: str
    content: str
    status: CommentStatus = CommentStatus.PENDING
    created_at: datetime
    updated_at: datetime | None = None


class NewComment(DomainModel):
    """Validated comment submission, ready to insert."""

    post_id: PostId
    author_name: str
    author_email: str
    content: str
    status: CommentStatus = CommentStatus.PENDING
