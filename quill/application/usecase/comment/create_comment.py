"""Create comment use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import AuthorSummary, BaseUseCase, CamelModel
from quill.domain.error import NotFoundError
from quill.domain.model import Comment, User
from quill.domain.service import BlogService, CommentService, UserService
from quill.domain.value import BlogId, UserId


class CommentItem(CamelModel):
    """Comment in a response."""

    id: int
    blog_id: int
    user_id: int
    content: str
    created_at: datetime
    user: AuthorSummary

    @classmethod
    def from_comment(cls, comment: Comment, user: User | None) -> "CommentItem":
        return cls(
            id=comment.id,
            blog_id=comment.blog_id,
            user_id=comment.user_id,
            content=comment.content,
            created_at=comment.created_at,
            user=AuthorSummary(
                id=comment.user_id,
                name=user.name if user else None,
                avatar_url=user.avatar_url if user else None,
            ),
        )


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    blog_id: int
    user_id: int  # Authenticated subject
    content: str


class CreateCommentResponse(CamelModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a blog. Open to any authenticated user."""

    def __init__(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            blog_service: Blog domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.blog_service = blog_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Create the comment.

        Raises:
            NotFoundError: If the blog doesn't exist
        """
        with logfire.span(
            "create_comment.execute", blog_id=request.blog_id, user_id=request.user_id
        ):
            blog_id = BlogId(request.blog_id)
            user_id = UserId(request.user_id)

            blog = await self.blog_service.get_blog_by_id(blog_id)
            if not blog:
                raise NotFoundError("Blog", str(request.blog_id))

            comment = await self.comment_service.create_comment(
                blog_id=blog_id, user_id=user_id, content=request.content
            )
            users = await self.user_service.get_users_by_ids({user_id})
            return CreateCommentResponse(
                comment=CommentItem.from_comment(comment, users.get(user_id))
            )
