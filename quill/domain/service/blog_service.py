"""Blog domain service."""

from datetime import datetime

import logfire

from quill.domain.model import Blog
from quill.domain.repository import BlogRepository
from quill.domain.value import BlogId, UserId

from .base import Service


class BlogService(Service):
    """Domain service for blog operations."""

    def __init__(self, blog_repository: BlogRepository) -> None:
        """Initialize blog service.

        Args:
            blog_repository: Blog repository
        """
        self.blog_repository = blog_repository

    async def create_blog(
        self,
        author_id: UserId,
        title: str,
        content: str,
        image_url: str | None = None,
    ) -> Blog:
        """Create a blog.

        Args:
            author_id: Authenticated author
            title: Blog title
            content: Blog body
            image_url: Optional cover image

        Returns:
            Created blog
        """
        with logfire.span("blog_service.create_blog", author_id=author_id, title=title):
            blog = await self.blog_repository.create(
                author_id=author_id, title=title, content=content, image_url=image_url
            )
            logfire.info("Blog created", blog_id=blog.id, author_id=author_id)
            return blog

    async def get_blog_by_id(self, blog_id: BlogId) -> Blog | None:
        """Get a blog by ID.

        Args:
            blog_id: Blog ID

        Returns:
            Blog if found, None otherwise
        """
        with logfire.span("blog_service.get_blog_by_id", blog_id=blog_id):
            blog = await self.blog_repository.find_by_id(blog_id)

            if not blog:
                logfire.warn("Blog not found", blog_id=blog_id)

            return blog

    async def list_blogs(self, limit: int, offset: int) -> list[Blog]:
        """List blogs newest first."""
        with logfire.span("blog_service.list_blogs", limit=limit, offset=offset):
            return await self.blog_repository.find_all(limit=limit, offset=offset)

    async def update_blog(
        self,
        blog: Blog,
        title: str,
        content: str,
        image_url: str | None = None,
    ) -> Blog:
        """Replace a blog's title and content.

        The caller must already have checked ownership.

        Args:
            blog: Loaded blog to update
            title: New title
            content: New content
            image_url: New cover image; None keeps the current one

        Returns:
            Updated blog
        """
        with logfire.span("blog_service.update_blog", blog_id=blog.id):
            updated = blog.model_copy(
                update={
                    "title": title,
                    "content": content,
                    "image_url": image_url if image_url is not None else blog.image_url,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.blog_repository.save(updated)
            logfire.info("Blog updated", blog_id=saved.id)
            return saved

    async def delete_blog(self, blog_id: BlogId) -> bool:
        """Delete a blog. The caller must already have checked ownership."""
        with logfire.span("blog_service.delete_blog", blog_id=blog_id):
            deleted = await self.blog_repository.delete(blog_id)
            logfire.info("Blog deleted", blog_id=blog_id, deleted=deleted)
            return deleted
