"""Delete blog use case."""

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase, CamelModel
from quill.domain.service import BlogService, OwnershipGuard
from quill.domain.value import BlogId, ResourceKind, UserId


class DeleteBlogRequest(BaseModel):
    """Delete blog request."""

    blog_id: int
    user_id: int  # Authenticated subject


class DeleteResponse(CamelModel):
    """Response for deleting a blog or comment."""

    id: int
    deleted: bool


class DeleteBlogUseCase(BaseUseCase):
    """Use case for deleting a blog with its comments and likes."""

    def __init__(self, blog_service: BlogService, ownership_guard: OwnershipGuard) -> None:
        """Initialize delete blog use case.

        Args:
            blog_service: Blog domain service
            ownership_guard: Ownership guard
        """
        self.blog_service = blog_service
        self.ownership_guard = ownership_guard

    async def execute(self, request: DeleteBlogRequest) -> DeleteResponse:
        """Delete the blog if the caller is its author.

        Raises:
            NotFoundError: If the blog doesn't exist
            NotAuthorizedError: If the caller is not the author
        """
        with logfire.span(
            "delete_blog.execute", blog_id=request.blog_id, user_id=request.user_id
        ):
            await self.ownership_guard.authorize(
                UserId(request.user_id), ResourceKind.BLOG, request.blog_id
            )
            deleted = await self.blog_service.delete_blog(BlogId(request.blog_id))
            return DeleteResponse(id=request.blog_id, deleted=deleted)
