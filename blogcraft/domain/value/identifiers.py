"""Strongly typed identifiers for blog entities.

The backend keys every table with an integer serial, so these wrap int.
"""

from typing import NewType

PostId = NewType("PostId", int)
AuthorId = NewType("AuthorId", int)
CategoryId = NewType("CategoryId", int)
TagId = NewType("TagId", int)
CommentId = NewType("CommentId", int)
