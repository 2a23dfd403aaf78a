"""Create blog use case."""

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase, CamelModel
from quill.domain.service import BlogService
from quill.domain.value import UserId


class CreateBlogRequest(BaseModel):
    """Create blog request."""

    author_id: int  # User ID from authenticated user
    title: str
    content: str
    image_url: str | None = None


class CreateBlogResponse(CamelModel):
    """Create blog response."""

    id: int


class CreateBlogUseCase(BaseUseCase):
    """Use case for publishing a new blog."""

    def __init__(self, blog_service: BlogService) -> None:
        """Initialize create blog use case.

        Args:
            blog_service: Blog domain service
        """
        self.blog_service = blog_service

    async def execute(self, request: CreateBlogRequest) -> CreateBlogResponse:
        """Create the blog with the authenticated subject as its author.

        Args:
            request: Create blog request

        Returns:
            ID of the new blog
        """
        with logfire.span("create_blog.execute", author_id=request.author_id):
            blog = await self.blog_service.create_blog(
                author_id=UserId(request.author_id),
                title=request.title,
                content=request.content,
                image_url=request.image_url,
            )
            return CreateBlogResponse(id=blog.id)
