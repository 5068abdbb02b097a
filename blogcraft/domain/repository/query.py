"""Query contracts shared by the post repositories.

A ViewIntent names what a reader asked for; QueryBuilder turns it into a
PostQuery, the canonical filter every PostRepository implementation
understands. Nothing in here knows about a particular backend dialect.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field, model_validator

from blogcraft.domain.model.common import DomainModel
from blogcraft.domain.value import PostId, PostStatus, Slug


class ViewKind(str, Enum):
    """Kind of reader-facing post view."""

    ALL_PUBLISHED = "all_published"
    BY_CATEGORY = "by_category"
    BY_TAG = "by_tag"
    BY_ID = "by_id"
    BY_SLUG = "by_slug"

    @property
    def is_single(self) -> bool:
        """Identity lookups return at most one post."""
        return self in (ViewKind.BY_ID, ViewKind.BY_SLUG)


class ViewIntent(DomainModel):
    """A requested post view with its pagination window.

    limit None means "use the configured default page size". Plain string
    slugs are validated into Slug, so a malformed one raises ValueError.
    """

    kind: ViewKind
    slug: Slug | None = None
    post_id: PostId | None = None
    limit: int | None = None
    offset: int = 0

    @model_validator(mode="after")
    def validate_identity(self) -> "ViewIntent":
        """Check the identifier each kind needs is present."""
        if self.kind in (ViewKind.BY_CATEGORY, ViewKind.BY_TAG, ViewKind.BY_SLUG):
            if not self.slug:
                raise ValueError(f"{self.kind.value} requires a slug")
        if self.kind == ViewKind.BY_ID and self.post_id is None:
            raise ValueError("by_id requires a post_id")
        return self

    @classmethod
    def all_published(cls, limit: int | None = None, offset: int = 0) -> "ViewIntent":
        return cls(kind=ViewKind.ALL_PUBLISHED, limit=limit, offset=offset)

    @classmethod
    def by_category(
        cls, slug: Slug | str, limit: int | None = None, offset: int = 0
    ) -> "ViewIntent":
        return cls(kind=ViewKind.BY_CATEGORY, slug=slug, limit=limit, offset=offset)

    @classmethod
    def by_tag(
        cls, slug: Slug | str, limit: int | None = None, offset: int = 0
    ) -> "ViewIntent":
        return cls(kind=ViewKind.BY_TAG, slug=slug, limit=limit, offset=offset)

    @classmethod
    def by_id(cls, post_id: PostId) -> "ViewIntent":
        return cls(kind=ViewKind.BY_ID, post_id=post_id)

    @classmethod
    def by_slug(cls, slug: Slug | str) -> "ViewIntent":
        return cls(kind=ViewKind.BY_SLUG, slug=slug)


class PostQuery(DomainModel):
    """Canonical post filter.

    All set predicates are ANDed. Results are ordered by published_at
    descending, then id ascending, so a fixed dataset always pages the
    same way.
    """

    status: PostStatus = PostStatus.PUBLISHED
    published_before: datetime
    category_slug: str | None = None
    tag_slug: str | None = None
    post_id: PostId | None = None
    slug: str | None = None
    limit: int = Field(ge=1)
    offset: int = Field(default=0, ge=0)

    def describe(self) -> dict[str, object]:
        """Set predicates only, for log attributes."""
        return self.model_dump(mode="json", exclude_none=True)
