"""Like entity.

A like is a user's reaction to a blog: either LIKE or DISLIKE.
"""

from datetime import datetime

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import BlogId, LikeId, LikeType, UserId


class Like(DomainModel):
    """Reaction of one user to one blog.

    Business rules:
    - At most one like per (blog, user), enforced by a unique constraint
    - Reacting again overwrites ``type`` instead of adding a row
    - Reactions are never removed, only re-typed
    """

    id: LikeId
    blog_id: BlogId
    user_id: UserId
    type: LikeType
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
