"""View assembler: shapes joined post rows for readers."""

import re
from html.parser import HTMLParser

from blogcraft.domain.model.category import CategoryBrief
from blogcraft.domain.model.post import Post, PostRecord, SearchResult
from blogcraft.domain.model.tag import TagRef

from .base import Service

_WHITESPACE_RE = re.compile(r"\s+")

# Text inside these elements is never shown to readers
_SKIPPED_TAGS = frozenset({"script", "style", "template"})


class _TextExtractor(HTMLParser):
    """Collects the visible text of an HTML fragment."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._parts: list[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag.lower() in _SKIPPED_TAGS:
            self._skip_depth += 1
        else:
            # Block boundaries separate words
            self._parts.append(" ")

    def handle_endtag(self, tag: str) -> None:
        if tag.lower() in _SKIPPED_TAGS and self._skip_depth:
            self._skip_depth -= 1
        else:
            self._parts.append(" ")

    def handle_data(self, data: str) -> None:
        if not self._skip_depth:
            self._parts.append(data)

    def get_text(self) -> str:
        return _WHITESPACE_RE.sub(" ", "".join(self._parts)).strip()


def html_to_text(fragment: str) -> str:
    """Strip markup from an HTML fragment, collapsing whitespace."""
    extractor = _TextExtractor()
    extractor.feed(fragment)
    extractor.close()
    return extractor.get_text()


def truncate_words(text: str, length: int) -> str:
    """Cut text to at most length characters on a word boundary.

    An ellipsis is appended when anything was cut.
    """
    if len(text) <= length:
        return text
    cut = text[: length - 1]
    if " " in cut:
        cut = cut.rsplit(" ", 1)[0]
    return cut.rstrip(" ,;:.") + "…"


class ViewAssembler(Service):
    """Converts PostRecord rows into reader-facing shapes.

    Missing counters and computed fields always come out as 0 and a missing
    excerpt is derived from the content, so assembly never fails on absent
    data.
    """

    def __init__(self, excerpt_length: int = 160) -> None:
        """Initialize view assembler.

        Args:
            excerpt_length: Maximum length of derived excerpts
        """
        self.excerpt_length = excerpt_length

    def assemble(self, record: PostRecord) -> Post:
        """Build the public post view from a joined row.

        Args:
            record: Post row with author, category and tag links

        Returns:
            Post with flattened tags and defaulted counters
        """
        return Post(
            id=record.id,
            title=record.title,
            slug=record.slug,
            excerpt=self.excerpt_for(record),
            content=record.content or "",
            featured_image_url=record.featured_image_url,
            author=record.author,
            category=record.category,
            tags=self.flatten_tags(record),
            status=record.status,
            published_at=record.published_at,
            updated_at=record.updated_at,
            views=max(record.views or 0, 0),
            comments_count=max(record.comments_count or 0, 0),
            reading_time=max(record.reading_time or 0, 0),
            meta_title=record.meta_title,
            meta_description=record.meta_description,
        )

    def assemble_search_result(self, record: PostRecord) -> SearchResult:
        """Build the search hit projection from a joined row."""
        category = (
            CategoryBrief(name=record.category.name, slug=record.category.slug)
            if record.category
            else None
        )
        return SearchResult(
            id=record.id,
            title=record.title,
            slug=record.slug,
            excerpt=self.excerpt_for(record),
            category=category,
            published_at=record.published_at,
        )

    def excerpt_for(self, record: PostRecord) -> str:
        """Stored excerpt, or one derived from the content."""
        if record.excerpt and record.excerpt.strip():
            return record.excerpt
        if not record.content:
            return ""
        return truncate_words(html_to_text(record.content), self.excerpt_length)

    @staticmethod
    def flatten_tags(record: PostRecord) -> list[TagRef]:
        """Map tag join rows to tag refs, dropping dangling links."""
        return [link.tag for link in record.tag_links if link.tag is not None]
