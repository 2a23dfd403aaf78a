"""Blog use cases."""

from .create_blog import CreateBlogRequest, CreateBlogResponse, CreateBlogUseCase
from .delete_blog import DeleteBlogRequest, DeleteBlogUseCase, DeleteResponse
from .get_blog import BlogItem, GetBlogRequest, GetBlogResponse, GetBlogUseCase
from .list_blogs import ListBlogsRequest, ListBlogsResponse, ListBlogsUseCase
from .update_blog import UpdateBlogRequest, UpdateBlogResponse, UpdateBlogUseCase

__all__ = [
    "BlogItem",
    "CreateBlogRequest",
    "CreateBlogResponse",
    "CreateBlogUseCase",
    "DeleteBlogRequest",
    "DeleteBlogUseCase",
    "DeleteResponse",
    "GetBlogRequest",
    "GetBlogResponse",
    "GetBlogUseCase",
    "ListBlogsRequest",
    "ListBlogsResponse",
    "ListBlogsUseCase",
    "UpdateBlogRequest",
    "UpdateBlogResponse",
    "UpdateBlogUseCase",
]
