"""Comment routes, nested under a blog."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import Field

from quill.application.usecase.base import CamelModel
from quill.application.usecase.blog import DeleteResponse
from quill.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from quill.domain.error import NotAuthorizedError, NotFoundError
from quill.domain.value import UserId
from quill.interface.api.auth import require_subject

router = APIRouter(prefix="/blog", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(CamelModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)


@router.get("/{blog_id}/comment", response_model=GetCommentsResponse)
async def get_comments(
    blog_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """List a blog's comments, newest first. Public."""
    try:
        return await get_comments_use_case.execute(GetCommentsRequest(blog_id=blog_id))
    except Exception as e:
        logfire.error("Unexpected error fetching comments", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching comments",
        )


@router.post(
    "/{blog_id}/comment",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    blog_id: int,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    subject_id: UserId = Depends(require_subject),
) -> CreateCommentResponse:
    """Comment on a blog as the authenticated user.

    Example:
        POST /blog/7/comment
        Authorization: Bearer <token for user 42>
        {"content": "hi"}

        Response (201):
        {"comment": {"id": 1, "blogId": 7, "userId": 42, "content": "hi", ...}}

    Raises:
        HTTPException: 401 if not authenticated, 400 if the body is invalid,
            404 if the blog doesn't exist
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                blog_id=blog_id, user_id=subject_id, content=request.content
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found"
        )
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error adding comment",
        )


@router.delete("/{blog_id}/comment/{comment_id}", response_model=DeleteResponse)
async def delete_comment(
    blog_id: int,
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    subject_id: UserId = Depends(require_subject),
) -> DeleteResponse:
    """Delete a comment. Comment author only.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the comment doesn't
            exist on this blog, 403 if the caller didn't write it
    """
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(
                blog_id=blog_id, comment_id=comment_id, user_id=subject_id
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found"
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )
    except Exception as e:
        logfire.error("Unexpected error deleting comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error deleting comment",
        )
