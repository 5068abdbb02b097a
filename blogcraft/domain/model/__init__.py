"""Domain model entities for the blog."""

from blogcraft.domain.model.author import Author
from blogcraft.domain.model.category import Category, CategoryBrief, CategorySummary
from blogcraft.domain.model.comment import Comment, NewComment
from blogcraft.domain.model.post import Post, PostRecord, SearchResult
from blogcraft.domain.model.tag import PostTagLink, Tag, TagRef

__all__ = [
    "Author",
    "Category",
    "CategoryBrief",
    "CategorySummary",
    "Comment",
    "NewComment",
    "Post",
    "PostRecord",
    "PostTagLink",
    "SearchResult",
    "Tag",
    "TagRef",
]
