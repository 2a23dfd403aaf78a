"""Blog routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import Field

from quill.application.usecase.base import CamelModel
from quill.application.usecase.blog import (
    CreateBlogRequest,
    CreateBlogResponse,
    CreateBlogUseCase,
    DeleteBlogRequest,
    DeleteBlogUseCase,
    DeleteResponse,
    GetBlogRequest,
    GetBlogResponse,
    GetBlogUseCase,
    ListBlogsRequest,
    ListBlogsResponse,
    ListBlogsUseCase,
    UpdateBlogRequest,
    UpdateBlogResponse,
    UpdateBlogUseCase,
)
from quill.domain.error import NotAuthorizedError, NotFoundError
from quill.domain.value import UserId
from quill.interface.api.auth import require_subject

router = APIRouter(prefix="/blog", tags=["blogs"], route_class=DishkaRoute)


class BlogAPIRequest(CamelModel):
    """API request for creating or replacing a blog."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=50000)
    image_url: str | None = None


@router.post("", response_model=CreateBlogResponse, status_code=status.HTTP_201_CREATED)
async def create_blog(
    request: BlogAPIRequest,
    create_blog_use_case: FromDishka[CreateBlogUseCase],
    subject_id: UserId = Depends(require_subject),
) -> CreateBlogResponse:
    """Publish a blog as the authenticated user.

    Raises:
        HTTPException: 401 if not authenticated, 400 if the body is invalid
    """
    try:
        return await create_blog_use_case.execute(
            CreateBlogRequest(
                author_id=subject_id,
                title=request.title,
                content=request.content,
                image_url=request.image_url,
            )
        )
    except Exception as e:
        logfire.error("Unexpected error creating blog", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create blog",
        )


# Registered before /{blog_id} so "bulk" is never parsed as an ID
@router.get("/bulk", response_model=ListBlogsResponse)
async def list_blogs(
    list_blogs_use_case: FromDishka[ListBlogsUseCase],
    limit: int = Query(default=30, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListBlogsResponse:
    """List blogs newest first. Public.

    Example:
        GET /blog/bulk?limit=10&offset=20
    """
    return await list_blogs_use_case.execute(
        ListBlogsRequest(limit=limit, offset=offset)
    )


@router.get("/{blog_id}", response_model=GetBlogResponse)
async def get_blog(
    blog_id: int,
    get_blog_use_case: FromDishka[GetBlogUseCase],
) -> GetBlogResponse:
    """Get a single blog with its author. Public.

    Raises:
        HTTPException: 404 if the blog doesn't exist
    """
    try:
        return await get_blog_use_case.execute(GetBlogRequest(blog_id=blog_id))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found"
        )


@router.put("/{blog_id}", response_model=UpdateBlogResponse)
async def update_blog(
    blog_id: int,
    request: BlogAPIRequest,
    update_blog_use_case: FromDishka[UpdateBlogUseCase],
    subject_id: UserId = Depends(require_subject),
) -> UpdateBlogResponse:
    """Replace a blog's title and content. Author only.

    Raises:
        HTTPException: 401 if not authenticated, 400 if the body is invalid,
            404 if the blog doesn't exist, 403 if the caller isn't the author
    """
    try:
        return await update_blog_use_case.execute(
            UpdateBlogRequest(
                blog_id=blog_id,
                user_id=subject_id,
                title=request.title,
                content=request.content,
                image_url=request.image_url,
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found"
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized blog update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to edit this blog",
        )
    except Exception as e:
        logfire.error("Unexpected error updating blog", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update blog",
        )


@router.delete("/{blog_id}", response_model=DeleteResponse)
async def delete_blog(
    blog_id: int,
    delete_blog_use_case: FromDishka[DeleteBlogUseCase],
    subject_id: UserId = Depends(require_subject),
) -> DeleteResponse:
    """Delete a blog with its comments and likes. Author only.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the blog doesn't
            exist, 403 if the caller isn't the author
    """
    try:
        return await delete_blog_use_case.execute(
            DeleteBlogRequest(blog_id=blog_id, user_id=subject_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found"
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized blog delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this blog",
        )
    except Exception as e:
        logfire.error("Unexpected error deleting blog", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete blog",
        )
