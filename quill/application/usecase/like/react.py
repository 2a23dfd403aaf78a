"""React to a blog use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase, CamelModel
from quill.domain.error import NotFoundError
from quill.domain.service import BlogService, LikeService
from quill.domain.value import BlogId, LikeType, UserId


class LikeItem(CamelModel):
    """Stored reaction in a response."""

    id: int
    blog_id: int
    user_id: int
    type: LikeType
    updated_at: datetime


class ReactRequest(BaseModel):
    """React request."""

    blog_id: int
    user_id: int  # Authenticated subject
    type: LikeType


class ReactResponse(CamelModel):
    """React response with the blog's new totals."""

    like: LikeItem
    likes_count: int
    dislikes_count: int


class ReactUseCase(BaseUseCase):
    """Use case for liking or disliking a blog.

    A user has at most one reaction per blog; reacting again switches it.
    """

    def __init__(self, like_service: LikeService, blog_service: BlogService) -> None:
        """Initialize react use case.

        Args:
            like_service: Like domain service
            blog_service: Blog domain service
        """
        self.like_service = like_service
        self.blog_service = blog_service

    async def execute(self, request: ReactRequest) -> ReactResponse:
        """Store the reaction and return the blog's totals.

        Raises:
            NotFoundError: If the blog doesn't exist
        """
        with logfire.span(
            "react.execute",
            blog_id=request.blog_id,
            user_id=request.user_id,
            type=request.type.value,
        ):
            blog_id = BlogId(request.blog_id)

            blog = await self.blog_service.get_blog_by_id(blog_id)
            if not blog:
                raise NotFoundError("Blog", str(request.blog_id))

            like = await self.like_service.react(
                blog_id, UserId(request.user_id), request.type
            )
            counts = await self.like_service.count(blog_id)

            return ReactResponse(
                like=LikeItem(
                    id=like.id,
                    blog_id=like.blog_id,
                    user_id=like.user_id,
                    type=like.type,
                    updated_at=like.updated_at,
                ),
                likes_count=counts.likes,
                dislikes_count=counts.dislikes,
            )
