"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from quill.domain.model import Blog, Comment, Like, User
from quill.domain.value import (
    BlogId,
    CommentId,
    LikeId,
    LikeType,
    UserId,
    Username,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=Username(row["username"]),
        password_hash=row["password_hash"],
        name=row.get("name"),
        bio=row.get("bio"),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["username"] = user.username.root
    return data


def row_to_blog(row: Dict[str, Any]) -> Blog:
    """Convert database row to Blog domain model."""
    return Blog(
        id=BlogId(row["id"]),
        author_id=UserId(row["author_id"]),
        title=row["title"],
        content=row["content"],
        image_url=row.get("image_url"),
        published=row.get("published", True),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def blog_to_dict(blog: Blog) -> Dict[str, Any]:
    """Convert Blog domain model to database dict."""
    return blog.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(row["id"]),
        blog_id=BlogId(row["blog_id"]),
        user_id=UserId(row["user_id"]),
        content=row["content"],
        created_at=row["created_at"],
    )


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(row["id"]),
        blog_id=BlogId(row["blog_id"]),
        user_id=UserId(row["user_id"]),
        type=LikeType(row["type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
