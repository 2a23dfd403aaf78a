"""PostgreSQL implementation of Like repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Like
from quill.domain.repository import LikeRepository
from quill.domain.value import BlogId, LikeType, UserId
from quill.persistence.mappers import row_to_like
from quill.persistence.tables import is_storable_id, likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_blog_and_user(
        self, blog_id: BlogId, user_id: UserId
    ) -> Optional[Like]:
        """Find a user's reaction to a blog."""
        if not (is_storable_id(blog_id) and is_storable_id(user_id)):
            return None
        stmt = select(likes_table).where(
            and_(
                likes_table.c.blog_id == blog_id,
                likes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_like(dict(row)) if row else None

    async def upsert(self, blog_id: BlogId, user_id: UserId, like_type: LikeType) -> Like:
        """Insert or re-type a reaction in one INSERT ... ON CONFLICT statement."""
        stmt = insert(likes_table).values(
            blog_id=blog_id, user_id=user_id, type=like_type.value
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[likes_table.c.blog_id, likes_table.c.user_id],
            set_={"type": stmt.excluded.type, "updated_at": datetime.now()},
        ).returning(likes_table)

        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_like(dict(row))

    async def count_by_blog(self, blog_id: BlogId, like_type: LikeType) -> int:
        """Count reactions of one type on a blog."""
        if not is_storable_id(blog_id):
            return 0
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(
                and_(
                    likes_table.c.blog_id == blog_id,
                    likes_table.c.type == like_type.value,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
