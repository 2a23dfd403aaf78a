"""Get reactions use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase, CamelModel
from quill.domain.service import LikeService
from quill.domain.value import BlogId, LikeType, UserId


class GetReactionsRequest(BaseModel):
    """Get reactions request."""

    blog_id: int
    user_id: int | None = None  # None for anonymous callers


class GetReactionsResponse(CamelModel):
    """Reaction totals plus the caller's own reaction, if any."""

    likes_count: int
    dislikes_count: int
    user_like: LikeType | None


class GetReactionsUseCase(BaseUseCase):
    """Use case for reading a blog's reaction totals."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize get reactions use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: GetReactionsRequest) -> GetReactionsResponse:
        """Count reactions. An unknown blog reports zero of each."""
        blog_id = BlogId(request.blog_id)
        user_id = UserId(request.user_id) if request.user_id is not None else None

        counts = await self.like_service.count(blog_id)
        own = await self.like_service.get_user_reaction(blog_id, user_id)

        return GetReactionsResponse(
            likes_count=counts.likes,
            dislikes_count=counts.dislikes,
            user_like=own.type if own else None,
        )
