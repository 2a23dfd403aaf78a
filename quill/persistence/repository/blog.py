"""PostgreSQL implementation of Blog repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Blog
from quill.domain.repository import BlogRepository
from quill.domain.value import BlogId, UserId
from quill.persistence.mappers import blog_to_dict, row_to_blog
from quill.persistence.tables import blogs_table, is_storable_id


class PostgresBlogRepository(BlogRepository):
    """PostgreSQL implementation of BlogRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        with logfire.span("blog_repository.find_by_id", blog_id=blog_id):
            if not is_storable_id(blog_id):
                return None
            stmt = select(blogs_table).where(blogs_table.c.id == blog_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_blog(dict(row)) if row else None

    async def find_all(self, limit: int = 30, offset: int = 0) -> List[Blog]:
        """List blogs newest first."""
        with logfire.span("blog_repository.find_all", limit=limit, offset=offset):
            stmt = (
                select(blogs_table)
                .order_by(desc(blogs_table.c.created_at), desc(blogs_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_blog(dict(row)) for row in result.mappings().all()]

    async def create(
        self,
        author_id: UserId,
        title: str,
        content: str,
        image_url: Optional[str] = None,
    ) -> Blog:
        """Insert a blog and return it with its assigned ID."""
        with logfire.span("blog_repository.create", author_id=author_id):
            stmt = (
                insert(blogs_table)
                .values(
                    author_id=author_id,
                    title=title,
                    content=content,
                    image_url=image_url,
                )
                .returning(blogs_table)
            )
            result = await self.session.execute(stmt)
            row = result.mappings().one()
            await self.session.flush()
            return row_to_blog(dict(row))

    async def save(self, blog: Blog) -> Blog:
        """Update an existing blog."""
        with logfire.span("blog_repository.save", blog_id=blog.id):
            values = blog_to_dict(blog)
            values.pop("id")
            values.pop("created_at")

            stmt = (
                update(blogs_table)
                .where(blogs_table.c.id == blog.id)
                .values(**values)
                .returning(blogs_table)
            )
            result = await self.session.execute(stmt)
            row = result.mappings().one()
            await self.session.flush()
            return row_to_blog(dict(row))

    async def delete(self, blog_id: BlogId) -> bool:
        """Delete a blog; comments and likes go with it via ON DELETE CASCADE."""
        with logfire.span("blog_repository.delete", blog_id=blog_id):
            if not is_storable_id(blog_id):
                return False
            stmt = delete(blogs_table).where(blogs_table.c.id == blog_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0  # type: ignore[attr-defined]
