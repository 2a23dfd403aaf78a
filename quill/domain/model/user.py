"""User aggregate root.

A user is the subject every credential token identifies. Users register
with a username and password and own the blogs, comments and reactions
they create.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root.

    ``password_hash`` is a bcrypt hash and never leaves the domain layer;
    response models copy the public fields explicitly.
    """

    id: UserId
    username: Username
    password_hash: str = Field(repr=False)
    name: Optional[str] = Field(default=None, max_length=100)
    bio: Optional[str] = Field(default=None, max_length=500)
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
