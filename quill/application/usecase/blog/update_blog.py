"""Update blog use case."""

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase, CamelModel
from quill.domain.service import BlogService, OwnershipGuard
from quill.domain.value import ResourceKind, UserId


class UpdateBlogRequest(BaseModel):
    """Update blog request."""

    blog_id: int
    user_id: int  # Authenticated subject
    title: str
    content: str
    image_url: str | None = None


class UpdateBlogResponse(CamelModel):
    """Update blog response."""

    id: int


class UpdateBlogUseCase(BaseUseCase):
    """Use case for editing a blog. Only the author may do this."""

    def __init__(self, blog_service: BlogService, ownership_guard: OwnershipGuard) -> None:
        """Initialize update blog use case.

        Args:
            blog_service: Blog domain service
            ownership_guard: Ownership guard
        """
        self.blog_service = blog_service
        self.ownership_guard = ownership_guard

    async def execute(self, request: UpdateBlogRequest) -> UpdateBlogResponse:
        """Execute update blog flow.

        Steps:
        1. Load the blog and check the caller is its author (404, then 403)
        2. Save the new title/content

        Raises:
            NotFoundError: If the blog doesn't exist
            NotAuthorizedError: If the caller is not the author
        """
        with logfire.span(
            "update_blog.execute", blog_id=request.blog_id, user_id=request.user_id
        ):
            blog = await self.ownership_guard.authorize(
                UserId(request.user_id), ResourceKind.BLOG, request.blog_id
            )
            updated = await self.blog_service.update_blog(
                blog,
                title=request.title,
                content=request.content,
                image_url=request.image_url,
            )
            return UpdateBlogResponse(id=updated.id)
