"""Comment entity."""

from datetime import datetime

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import BlogId, CommentId, UserId


class Comment(DomainModel):
    """Comment on a blog.

    Any authenticated user may comment; only the comment's author may
    delete it.
    """

    id: CommentId
    blog_id: BlogId
    user_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def owner_id(self) -> UserId:
        return self.user_id
