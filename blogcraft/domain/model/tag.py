"""Tag entities."""

from pydantic import Field

from blogcraft.domain.model.common import DomainModel
from blogcraft.domain.value import TagId


class Tag(DomainModel):
    """Tag entity.

    Tags relate to posts many-to-many through the post_tags join table.
    posts_count is denormalized like Category.posts_count.
    """

    id: TagId
    name: str
    slug: str
    posts_count: int = Field(default=0, ge=0)


class TagRef(DomainModel):
    """Tag as listed on a post."""

    id: TagId
    name: str
    slug: str


class PostTagLink(DomainModel):
    """One post_tags join row with its tag joined in.

    The tag is None when the join row points at a tag that no longer exists.
    """

    tag: TagRef | None = None
