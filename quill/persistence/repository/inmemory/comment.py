"""In-memory comment repository for testing."""

from typing import Optional

from quill.domain.model.comment import Comment
from quill.domain.repository.comment import CommentRepository
from quill.domain.value import BlogId, CommentId, UserId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_by_blog(self, blog_id: BlogId) -> list[Comment]:
        """Find all comments on a blog, newest first."""
        comments = [c for c in self._store.comments.values() if c.blog_id == blog_id]
        return sorted(comments, key=lambda c: (c.created_at, c.id), reverse=True)

    async def create(self, blog_id: BlogId, user_id: UserId, content: str) -> Comment:
        """Create a comment."""
        comment = Comment(
            id=CommentId(self._store.next_id("comments")),
            blog_id=blog_id,
            user_id=user_id,
            content=content,
        )
        self._store.comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._store.comments.pop(comment_id, None) is not None
