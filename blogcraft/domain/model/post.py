"""Post entities.

PostRecord is a post row as the backend returns it, with author, category
and tag join rows attached and every counter nullable. Post is the public
shape handed to readers; ViewAssembler converts one into the other.
"""

from datetime import datetime

from pydantic import Field

from blogcraft.domain.model.author import Author
from blogcraft.domain.model.category import CategoryBrief, CategorySummary
from blogcraft.domain.model.common import DomainModel
from blogcraft.domain.model.tag import PostTagLink, TagRef
from blogcraft.domain.value import PostId, PostStatus


class PostRecord(DomainModel):
    """Joined post row as stored."""

    id: PostId
    title: str
    slug: str
    excerpt: str | None = None
    content: str | None = None
    featured_image_url: str | None = None
    author: Author | None = None
    category: CategorySummary | None = None
    tag_links: list[PostTagLink] = Field(default_factory=list)
    status: PostStatus
    published_at: datetime | None = None
    updated_at: datetime | None = None
    views: int | None = None
    comments_count: int | None = None
    reading_time: int | None = None
    meta_title: str | None = None
    meta_description: str | None = None

    @property
    def tag_names(self) -> list[str]:
        """Names of the tags that are still attached."""
        return [link.tag.name for link in self.tag_links if link.tag is not None]


class Post(DomainModel):
    """Published post as presented to readers."""

    id: PostId
    title: str
    slug: str
    excerpt: str
    content: str
    featured_image_url: str | None
    author: Author | None
    category: CategorySummary | None
    tags: list[TagRef]
    status: PostStatus
    published_at: datetime | None
    updated_at: datetime | None
    views: int = Field(ge=0)
    comments_count: int = Field(ge=0)
    reading_time: int = Field(ge=0)
    meta_title: str | None
    meta_description: str | None


class SearchResult(DomainModel):
    """Search hit projection of a post."""

    id: PostId
    title: str
    slug: str
    excerpt: str
    category: CategoryBrief | None
    published_at: datetime | None
