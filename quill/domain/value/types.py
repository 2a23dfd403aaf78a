"""Domain value objects for Quill.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from quill.domain.value.common import RootValueObject


class LikeType(str, Enum):
    """Reaction a user can leave on a blog."""

    LIKE = "LIKE"
    DISLIKE = "DISLIKE"


class ResourceKind(str, Enum):
    """Kinds of owned resources protected by the ownership guard."""

    BLOG = "blog"
    COMMENT = "comment"


class Username(RootValueObject[str]):
    """Unique login name.

    3-30 characters, no whitespace. Email addresses are allowed.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username length and characters."""
        if not 3 <= len(v) <= 30:
            raise ValueError("Username must be 3-30 characters")
        if not re.match(r"^\S+$", v):
            raise ValueError("Username must not contain whitespace")
        return v
