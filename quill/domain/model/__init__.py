"""Domain model entities for Quill."""

from quill.domain.model.blog import Blog
from quill.domain.model.comment import Comment
from quill.domain.model.like import Like
from quill.domain.model.user import User

__all__ = [
    "User",
    "Blog",
    "Comment",
    "Like",
]
