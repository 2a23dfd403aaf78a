"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quill.domain.model.like import Like
from quill.domain.value import BlogId, LikeType, UserId


class LikeRepository(ABC):
    """Repository for Like entity."""

    @abstractmethod
    async def find_by_blog_and_user(
        self, blog_id: BlogId, user_id: UserId
    ) -> Optional[Like]:
        """Find a user's reaction to a blog.

        Args:
            blog_id: The blog's ID
            user_id: The user's ID

        Returns:
            The like if the user has reacted, None otherwise
        """
        pass

    @abstractmethod
    async def upsert(self, blog_id: BlogId, user_id: UserId, like_type: LikeType) -> Like:
        """Insert a reaction or overwrite the type of the existing one.

        Must be a single atomic operation keyed on (blog_id, user_id) so that
        concurrent reactions from the same user never produce two rows.

        Args:
            blog_id: The blog's ID
            user_id: The user's ID
            like_type: LIKE or DISLIKE

        Returns:
            The stored like
        """
        pass

    @abstractmethod
    async def count_by_blog(self, blog_id: BlogId, like_type: LikeType) -> int:
        """Count reactions of one type on a blog.

        Args:
            blog_id: The blog's ID
            like_type: LIKE or DISLIKE

        Returns:
            Number of reactions
        """
        pass
