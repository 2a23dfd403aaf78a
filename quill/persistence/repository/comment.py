"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Comment
from quill.domain.repository import CommentRepository
from quill.domain.value import BlogId, CommentId, UserId
from quill.persistence.mappers import row_to_comment
from quill.persistence.tables import comments_table, is_storable_id


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        if not is_storable_id(comment_id):
            return None
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_blog(self, blog_id: BlogId) -> List[Comment]:
        """Find all comments on a blog, newest first."""
        if not is_storable_id(blog_id):
            return []
        stmt = (
            select(comments_table)
            .where(comments_table.c.blog_id == blog_id)
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def create(self, blog_id: BlogId, user_id: UserId, content: str) -> Comment:
        """Insert a comment and return it with its assigned ID."""
        stmt = (
            insert(comments_table)
            .values(blog_id=blog_id, user_id=user_id, content=content)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_comment(dict(row))

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        if not is_storable_id(comment_id):
            return False
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
