"""In-memory repository implementations for testing."""

from .blog import InMemoryBlogRepository
from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryBlogRepository",
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
