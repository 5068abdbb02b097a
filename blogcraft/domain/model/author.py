"""Author entity."""

from blogcraft.domain.model.common import DomainModel
from blogcraft.domain.value import AuthorId


class Author(DomainModel):
    """Post author as embedded in post views."""

    id: AuthorId
    name: str
    bio: str | None = None
    avatar: str | None = None
