"""PostgreSQL repository implementations."""

from quill.persistence.repository.blog import PostgresBlogRepository
from quill.persistence.repository.comment import PostgresCommentRepository
from quill.persistence.repository.like import PostgresLikeRepository
from quill.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresBlogRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
]
