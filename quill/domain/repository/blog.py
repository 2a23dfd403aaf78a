"""Blog repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quill.domain.model.blog import Blog
from quill.domain.value import BlogId, UserId


class BlogRepository(ABC):
    """Repository for Blog aggregate."""

    @abstractmethod
    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID.

        Args:
            blog_id: The blog's unique identifier

        Returns:
            The blog if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 30, offset: int = 0) -> list[Blog]:
        """List blogs, newest first.

        Args:
            limit: Maximum number of blogs to return
            offset: Number of blogs to skip

        Returns:
            List of blogs
        """
        pass

    @abstractmethod
    async def create(
        self,
        author_id: UserId,
        title: str,
        content: str,
        image_url: Optional[str] = None,
    ) -> Blog:
        """Create a blog and assign its ID.

        Returns:
            The created blog
        """
        pass

    @abstractmethod
    async def save(self, blog: Blog) -> Blog:
        """Update an existing blog.

        Args:
            blog: The blog to save

        Returns:
            The saved blog
        """
        pass

    @abstractmethod
    async def delete(self, blog_id: BlogId) -> bool:
        """Delete a blog together with its comments and likes.

        Args:
            blog_id: The blog to delete

        Returns:
            True if a blog was deleted, False if it did not exist
        """
        pass
