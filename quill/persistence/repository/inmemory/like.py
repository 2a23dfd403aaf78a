"""In-memory like repository for testing."""

from datetime import datetime
from typing import Optional

from quill.domain.model.like import Like
from quill.domain.repository.like import LikeRepository
from quill.domain.value import BlogId, LikeId, LikeType, UserId

from .store import InMemoryStore


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_blog_and_user(
        self, blog_id: BlogId, user_id: UserId
    ) -> Optional[Like]:
        """Find a user's reaction to a blog."""
        for like in self._store.likes.values():
            if like.blog_id == blog_id and like.user_id == user_id:
                return like
        return None

    async def upsert(self, blog_id: BlogId, user_id: UserId, like_type: LikeType) -> Like:
        """Insert a reaction or overwrite the type of the existing one."""
        existing = await self.find_by_blog_and_user(blog_id, user_id)
        if existing:
            like = existing.model_copy(
                update={"type": like_type, "updated_at": datetime.now()}
            )
        else:
            like = Like(
                id=LikeId(self._store.next_id("likes")),
                blog_id=blog_id,
                user_id=user_id,
                type=like_type,
            )
        self._store.likes[like.id] = like
        return like

    async def count_by_blog(self, blog_id: BlogId, like_type: LikeType) -> int:
        """Count reactions of one type on a blog."""
        return sum(
            1
            for like in self._store.likes.values()
            if like.blog_id == blog_id and like.type == like_type
        )
