"""Like domain service."""

from dataclasses import dataclass

import logfire

from quill.domain.model import Like
from quill.domain.repository import LikeRepository
from quill.domain.value import BlogId, LikeType, UserId

from .base import Service


@dataclass
class LikeCounts:
    """Reaction totals for one blog."""

    likes: int
    dislikes: int


class LikeService(Service):
    """Domain service for reactions."""

    def __init__(self, like_repository: LikeRepository) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
        """
        self.like_repository = like_repository

    async def react(self, blog_id: BlogId, user_id: UserId, like_type: LikeType) -> Like:
        """Record a user's reaction, replacing any earlier one.

        The caller must already have checked that the blog exists.

        Args:
            blog_id: Blog ID
            user_id: Reacting user
            like_type: LIKE or DISLIKE

        Returns:
            The stored like
        """
        with logfire.span(
            "like_service.react",
            blog_id=blog_id,
            user_id=user_id,
            like_type=like_type.value,
        ):
            like = await self.like_repository.upsert(blog_id, user_id, like_type)
            logfire.info("Reaction stored", like_id=like.id, like_type=like.type.value)
            return like

    async def count(self, blog_id: BlogId) -> LikeCounts:
        """Count likes and dislikes on a blog."""
        return LikeCounts(
            likes=await self.like_repository.count_by_blog(blog_id, LikeType.LIKE),
            dislikes=await self.like_repository.count_by_blog(blog_id, LikeType.DISLIKE),
        )

    async def get_user_reaction(
        self, blog_id: BlogId, user_id: UserId | None
    ) -> Like | None:
        """Get a user's reaction to a blog, or None for anonymous callers."""
        if user_id is None:
            return None
        return await self.like_repository.find_by_blog_and_user(blog_id, user_id)
