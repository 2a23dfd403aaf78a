"""List blogs use case."""

from pydantic import BaseModel, Field

from quill.application.usecase.base import BaseUseCase, CamelModel
from quill.domain.service import BlogService, UserService

from .get_blog import BlogItem, build_blog_items


class ListBlogsRequest(BaseModel):
    """List blogs request."""

    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListBlogsResponse(CamelModel):
    """List blogs response."""

    blogs: list[BlogItem]


class ListBlogsUseCase(BaseUseCase):
    """Use case for the public blog feed."""

    def __init__(self, blog_service: BlogService, user_service: UserService) -> None:
        """Initialize list blogs use case.

        Args:
            blog_service: Blog domain service
            user_service: User domain service for author details
        """
        self.blog_service = blog_service
        self.user_service = user_service

    async def execute(self, request: ListBlogsRequest) -> ListBlogsResponse:
        """List blogs newest first."""
        blogs = await self.blog_service.list_blogs(
            limit=request.limit, offset=request.offset
        )
        return ListBlogsResponse(
            blogs=await build_blog_items(blogs, self.user_service)
        )
