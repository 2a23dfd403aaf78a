"""Like routes, nested under a blog."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status

from quill.application.usecase.base import CamelModel
from quill.application.usecase.like import (
    GetReactionsRequest,
    GetReactionsResponse,
    GetReactionsUseCase,
    ReactRequest,
    ReactResponse,
    ReactUseCase,
)
from quill.domain.error import NotFoundError
from quill.domain.value import LikeType, UserId
from quill.interface.api.auth import optional_subject, require_subject

router = APIRouter(prefix="/blog", tags=["likes"], route_class=DishkaRoute)


class ReactAPIRequest(CamelModel):
    """API request for liking or disliking a blog."""

    type: LikeType


@router.post("/{blog_id}/like", response_model=ReactResponse)
async def react(
    blog_id: int,
    request: ReactAPIRequest,
    react_use_case: FromDishka[ReactUseCase],
    subject_id: UserId = Depends(require_subject),
) -> ReactResponse:
    """Like or dislike a blog; reacting again switches the reaction.

    Example:
        POST /blog/7/like
        {"type": "DISLIKE"}

        Response:
        {"like": {...}, "likesCount": 3, "dislikesCount": 1}

    Raises:
        HTTPException: 401 if not authenticated, 400 if the type is invalid,
            404 if the blog doesn't exist
    """
    try:
        return await react_use_case.execute(
            ReactRequest(blog_id=blog_id, user_id=subject_id, type=request.type)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found"
        )
    except Exception as e:
        logfire.error("Unexpected error processing reaction", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error processing like/dislike",
        )


@router.get("/{blog_id}/like", response_model=GetReactionsResponse)
async def get_reactions(
    blog_id: int,
    get_reactions_use_case: FromDishka[GetReactionsUseCase],
    subject_id: UserId | None = Depends(optional_subject),
) -> GetReactionsResponse:
    """Reaction totals for a blog, plus the caller's own reaction.

    Anonymous and invalid-token callers get ``userLike: null``; this route
    never answers 401.
    """
    try:
        return await get_reactions_use_case.execute(
            GetReactionsRequest(blog_id=blog_id, user_id=subject_id)
        )
    except Exception as e:
        logfire.error("Unexpected error fetching reactions", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching likes",
        )
