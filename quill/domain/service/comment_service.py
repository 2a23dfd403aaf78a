"""Comment domain service."""

import logfire

from quill.domain.model import Comment
from quill.domain.repository import CommentRepository
from quill.domain.value import BlogId, CommentId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self, blog_id: BlogId, user_id: UserId, content: str
    ) -> Comment:
        """Create a comment on a blog.

        The caller must already have checked that the blog exists.
        """
        with logfire.span(
            "comment_service.create_comment", blog_id=blog_id, user_id=user_id
        ):
            comment = await self.comment_repository.create(
                blog_id=blog_id, user_id=user_id, content=content
            )
            logfire.info("Comment created", comment_id=comment.id, blog_id=blog_id)
            return comment

    async def get_comments_for_blog(self, blog_id: BlogId) -> list[Comment]:
        """Get a blog's comments, newest first."""
        with logfire.span("comment_service.get_comments_for_blog", blog_id=blog_id):
            comments = await self.comment_repository.find_by_blog(blog_id)
            logfire.info("Comments loaded", blog_id=blog_id, count=len(comments))
            return comments

    async def delete_comment(self, comment_id: CommentId) -> bool:
        """Delete a comment. The caller must already have checked ownership."""
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            deleted = await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=comment_id, deleted=deleted)
            return deleted
