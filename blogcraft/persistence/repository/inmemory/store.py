"""Shared dataset behind the in-memory repositories.

One store is shared by every in-memory repository created from it, so a
comment inserted through one repository is visible to the next request.
"""

from datetime import datetime, timezone
from itertools import count

from blogcraft.domain.model import Category, Comment, NewComment, PostRecord, Tag
from blogcraft.domain.value import CategoryId, CommentId, PostId, TagId


class InMemoryContentStore:
    """Posts, taxonomy and comments held in dicts keyed by id."""

    def __init__(self) -> None:
        self.posts: dict[PostId, PostRecord] = {}
        self.categories: dict[CategoryId, Category] = {}
        self.tags: dict[TagId, Tag] = {}
        self.comments: dict[CommentId, Comment] = {}
        self._comment_ids = count(1)

    def add_post(self, post: PostRecord) -> PostRecord:
        self.posts[post.id] = post
        return post

    def add_category(self, category: Category) -> Category:
        self.categories[category.id] = category
        return category

    def add_tag(self, tag: Tag) -> Tag:
        self.tags[tag.id] = tag
        return tag

    def add_comment(self, comment: Comment) -> Comment:
        self.comments[comment.id] = comment
        return comment

    def store_new_comment(self, new_comment: NewComment) -> Comment:
        """Assign an id and timestamps, as the database would."""
        comment_id = CommentId(next(self._comment_ids))
        while comment_id in self.comments:
            comment_id = CommentId(next(self._comment_ids))
        now = datetime.now(timezone.utc)
        return self.add_comment(
            Comment(
                id=comment_id,
                created_at=now,
                updated_at=now,
                **new_comment.model_dump(),
            )
        )

    def clear(self) -> None:
        self.posts.clear()
        self.categories.clear()
        self.tags.clear()
        self.comments.clear()
