"""Get blog use case."""

from datetime import datetime

from pydantic import BaseModel

from quill.application.usecase.base import AuthorSummary, BaseUseCase, CamelModel
from quill.domain.error import NotFoundError
from quill.domain.model import Blog
from quill.domain.service import BlogService, UserService
from quill.domain.value import BlogId


class BlogItem(CamelModel):
    """Blog in a response."""

    id: int
    title: str
    content: str
    image_url: str | None
    published: bool
    created_at: datetime
    updated_at: datetime
    author: AuthorSummary


async def build_blog_items(
    blogs: list[Blog], user_service: UserService
) -> list[BlogItem]:
    """Attach author summaries to blogs, loading each author once."""
    authors = await user_service.get_users_by_ids({blog.author_id for blog in blogs})

    items = []
    for blog in blogs:
        author = authors.get(blog.author_id)
        items.append(
            BlogItem(
                id=blog.id,
                title=blog.title,
                content=blog.content,
                image_url=blog.image_url,
                published=blog.published,
                created_at=blog.created_at,
                updated_at=blog.updated_at,
                author=AuthorSummary(
                    id=blog.author_id,
                    name=author.name if author else None,
                    avatar_url=author.avatar_url if author else None,
                ),
            )
        )
    return items


class GetBlogRequest(BaseModel):
    """Get blog request."""

    blog_id: int


class GetBlogResponse(CamelModel):
    """Get blog response."""

    blog: BlogItem


class GetBlogUseCase(BaseUseCase):
    """Use case for reading a single blog."""

    def __init__(self, blog_service: BlogService, user_service: UserService) -> None:
        """Initialize get blog use case.

        Args:
            blog_service: Blog domain service
            user_service: User domain service for author details
        """
        self.blog_service = blog_service
        self.user_service = user_service

    async def execute(self, request: GetBlogRequest) -> GetBlogResponse:
        """Load a blog with its author.

        Raises:
            NotFoundError: If the blog doesn't exist
        """
        blog = await self.blog_service.get_blog_by_id(BlogId(request.blog_id))
        if not blog:
            raise NotFoundError("Blog", str(request.blog_id))

        [item] = await build_blog_items([blog], self.user_service)
        return GetBlogResponse(blog=item)
