"""Domain value objects for Quill."""

from quill.domain.value.identifiers import BlogId, CommentId, LikeId, UserId
from quill.domain.value.types import LikeType, ResourceKind, Username

__all__ = [
    # Identifiers
    "UserId",
    "BlogId",
    "CommentId",
    "LikeId",
    # Types
    "LikeType",
    "ResourceKind",
    "Username",
]
