"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.blog import DeleteResponse
from quill.domain.error import NotFoundError
from quill.domain.service import CommentService, OwnershipGuard
from quill.domain.value import CommentId, ResourceKind, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    blog_id: int
    comment_id: int
    user_id: int  # Authenticated subject


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment. Only its author may do this."""

    def __init__(
        self, comment_service: CommentService, ownership_guard: OwnershipGuard
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            ownership_guard: Ownership guard
        """
        self.comment_service = comment_service
        self.ownership_guard = ownership_guard

    async def execute(self, request: DeleteCommentRequest) -> DeleteResponse:
        """Delete the comment if the caller wrote it.

        Raises:
            NotFoundError: If the comment doesn't exist or belongs to another blog
            NotAuthorizedError: If the caller is not the comment's author
        """
        with logfire.span(
            "delete_comment.execute",
            comment_id=request.comment_id,
            user_id=request.user_id,
        ):
            comment = await self.ownership_guard.authorize(
                UserId(request.user_id), ResourceKind.COMMENT, request.comment_id
            )
            if comment.blog_id != request.blog_id:
                raise NotFoundError("Comment", str(request.comment_id))

            deleted = await self.comment_service.delete_comment(
                CommentId(request.comment_id)
            )
            return DeleteResponse(id=request.comment_id, deleted=deleted)
