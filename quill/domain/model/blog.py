"""Blog aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import BlogId, UserId


class Blog(DomainModel):
    """A post written by a single author.

    Only the author may edit or delete it. Anyone may read it.
    """

    id: BlogId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=50000)
    image_url: Optional[str] = None
    published: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def owner_id(self) -> UserId:
        return self.author_id
