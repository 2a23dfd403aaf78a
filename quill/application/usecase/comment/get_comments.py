"""Get comments use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase, CamelModel
from quill.domain.service import CommentService, UserService
from quill.domain.value import BlogId

from .create_comment import CommentItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    blog_id: int


class GetCommentsResponse(CamelModel):
    """Get comments response."""

    comments: list[CommentItem]


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading a blog's comments."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service for commenter details
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """List comments newest first. An unknown blog simply has none."""
        comments = await self.comment_service.get_comments_for_blog(
            BlogId(request.blog_id)
        )
        users = await self.user_service.get_users_by_ids({c.user_id for c in comments})

        return GetCommentsResponse(
            comments=[
                CommentItem.from_comment(comment, users.get(comment.user_id))
                for comment in comments
            ]
        )
