"""Shared state for the in-memory repositories."""

from collections import defaultdict
from itertools import count

from quill.domain.model import Blog, Comment, Like, User


class InMemoryStore:
    """Tables and ID sequences shared by the in-memory repositories.

    Sharing one store lets deleting a blog cascade to its comments and
    likes the way the foreign keys do in PostgreSQL.
    """

    def __init__(self) -> None:
        self.users: dict[int, User] = {}
        self.blogs: dict[int, Blog] = {}
        self.comments: dict[int, Comment] = {}
        self.likes: dict[int, Like] = {}
        self._sequences: defaultdict[str, count] = defaultdict(lambda: count(1))

    def next_id(self, table: str) -> int:
        """Next autoincrement value for ``table``."""
        return next(self._sequences[table])
