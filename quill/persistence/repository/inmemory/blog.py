"""In-memory blog repository for testing."""

from typing import Optional

from quill.domain.model.blog import Blog
from quill.domain.repository.blog import BlogRepository
from quill.domain.value import BlogId, UserId

from .store import InMemoryStore


class InMemoryBlogRepository(BlogRepository):
    """In-memory implementation of BlogRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        return self._store.blogs.get(blog_id)

    async def find_all(self, limit: int = 30, offset: int = 0) -> list[Blog]:
        """List blogs newest first."""
        blogs = sorted(
            self._store.blogs.values(),
            key=lambda b: (b.created_at, b.id),
            reverse=True,
        )
        return blogs[offset : offset + limit]

    async def create(
        self,
        author_id: UserId,
        title: str,
        content: str,
        image_url: Optional[str] = None,
    ) -> Blog:
        """Create a blog."""
        blog = Blog(
            id=BlogId(self._store.next_id("blogs")),
            author_id=author_id,
            title=title,
            content=content,
            image_url=image_url,
        )
        self._store.blogs[blog.id] = blog
        return blog

    async def save(self, blog: Blog) -> Blog:
        """Update an existing blog."""
        self._store.blogs[blog.id] = blog
        return blog

    async def delete(self, blog_id: BlogId) -> bool:
        """Delete a blog along with its comments and likes."""
        if self._store.blogs.pop(blog_id, None) is None:
            return False

        self._store.comments = {
            k: c for k, c in self._store.comments.items() if c.blog_id != blog_id
        }
        self._store.likes = {
            k: like for k, like in self._store.likes.items() if like.blog_id != blog_id
        }
        return True
