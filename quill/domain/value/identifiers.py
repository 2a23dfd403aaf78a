"""Strongly typed identifiers for Quill domain entities.

All entities use database-assigned integer keys. ``UserId`` doubles as the
canonical subject id carried by credential tokens.
"""

from typing import NewType

UserId = NewType("UserId", int)
BlogId = NewType("BlogId", int)
CommentId = NewType("CommentId", int)
LikeId = NewType("LikeId", int)
