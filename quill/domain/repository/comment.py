"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quill.domain.model.comment import Comment
from quill.domain.value import BlogId, CommentId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def find_by_blog(self, blog_id: BlogId) -> list[Comment]:
        """Find all comments on a blog, newest first.

        Args:
            blog_id: The blog's ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def create(self, blog_id: BlogId, user_id: UserId, content: str) -> Comment:
        """Create a comment and assign its ID."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Returns:
            True if a comment was deleted, False if it did not exist
        """
        pass
