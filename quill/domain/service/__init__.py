"""Domain services for Quill."""

from quill.domain.service.base import Service
from quill.domain.service.blog_service import BlogService
from quill.domain.service.comment_service import CommentService
from quill.domain.service.identity_service import IdentityResolver
from quill.domain.service.jwt_service import JWTService
from quill.domain.service.like_service import LikeCounts, LikeService
from quill.domain.service.ownership_service import OwnershipGuard
from quill.domain.service.password_service import PasswordService
from quill.domain.service.user_service import UserService

__all__ = [
    "Service",
    "JWTService",
    "IdentityResolver",
    "PasswordService",
    "UserService",
    "BlogService",
    "CommentService",
    "LikeService",
    "LikeCounts",
    "OwnershipGuard",
]
