"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum
from typing import ClassVar

from pydantic import ValidationError as PydanticValidationError
from pydantic import field_validator

from blogcraft.domain.value.common import RootValueObject


class PostStatus(str, Enum):
    """Publication status of a post."""

    DRAFT = "draft"
    PUBLISHED = "published"
    SCHEDULED = "scheduled"
    ARCHIVED = "archived"


class CommentStatus(str, Enum):
    """Moderation status of a comment."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class SearchTerm(RootValueObject[str]):
    """Free-text search term.

    Always trimmed and non-empty. Matching is a case-insensitive substring
    test against title, content and tag names; a post matches when any
    field contains the term.
    """

    TITLE_WEIGHT: ClassVar[int] = 4
    TAG_WEIGHT: ClassVar[int] = 2
    CONTENT_WEIGHT: ClassVar[int] = 1

    MAX_LENGTH: ClassVar[int] = 200

    @field_validator("root")
    @classmethod
    def validate_term(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank terms."""
        v = v.strip()
        if not v:
            raise ValueError("Search term must not be blank")
        if len(v) > cls.MAX_LENGTH:
            raise ValueError(f"Search term must be at most {cls.MAX_LENGTH} characters")
        return v

    @classmethod
    def parse(cls, raw: str | None) -> "SearchTerm | None":
        """Build a term from user input.

        Returns None for blank input and for input longer than MAX_LENGTH
        once trimmed, so a search over it simply finds nothing.
        """
        if raw is None:
            return None
        raw = raw.strip()
        if not raw or len(raw) > cls.MAX_LENGTH:
            return None
        return cls(raw)

    @property
    def folded(self) -> str:
        """Lowercased term used for comparisons."""
        return self.root.lower()

    def relevance(self, title: str, content: str | None, tag_names: list[str]) -> int:
        """Score a post against this term.

        Title hits weigh most, then tag names, then body content.
        Returns 0 when nothing matches.
        """
        needle = self.folded
        score = 0
        if needle in title.lower():
            score += self.TITLE_WEIGHT
        if any(needle in name.lower() for name in tag_names):
            score += self.TAG_WEIGHT
        if content and needle in content.lower():
            score += self.CONTENT_WEIGHT
        return score

    def matches(self, title: str, content: str | None, tag_names: list[str]) -> bool:
        """True if any field contains the term."""
        return self.relevance(title, content, tag_names) > 0


class Slug(RootValueObject[str]):
    """URL slug of a post, category or tag.

    Lowercase alphanumerics separated by single hyphens, 1-200 characters.
    Input is trimmed and lowercased before it is checked, so "Hello-World"
    and "hello-world" name the same resource.
    """

    MAX_LENGTH: ClassVar[int] = 200
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

    @field_validator("root")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        """Normalize case and check the slug shape."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Slug must not be empty")
        if len(v) > cls.MAX_LENGTH:
            raise ValueError(f"Slug must be at most {cls.MAX_LENGTH} characters")
        if not cls.PATTERN.match(v):
            raise ValueError(
                "Slug must be lowercase letters and digits separated by single hyphens"
            )
        return v

    @classmethod
    def parse(cls, raw: str | None) -> "Slug | None":
        """Build a slug from a URL segment, or None if it cannot be one."""
        if raw is None:
            return None
        try:
            return cls(raw)
        except PydanticValidationError:
            return None
