"""Category entities.

A post belongs to at most one category. The full entity backs the category
directory; the summaries are the shapes embedded in posts and search
results.
"""

from datetime import datetime

from pydantic import Field

from blogcraft.domain.model.common import DomainModel
from blogcraft.domain.value import CategoryId


class Category(DomainModel):
    """Category entity.

    posts_count is denormalized: it is kept in step with the number of
    published posts by the admin write path, not computed on read.
    """

    id: CategoryId
    name: str
    slug: str
    description: str | None = None
    color: str | None = None
    is_active: bool = True
    posts_count: int = Field(default=0, ge=0)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CategorySummary(DomainModel):
    """Category as joined into a post row."""

    id: CategoryId
    name: str
    slug: str
    description: str | None = None
    color: str | None = None


class CategoryBrief(DomainModel):
    """Category name and slug, as carried by search results."""

    name: str
    slug: str
