"""Unit tests for the in-memory repositories."""

import pytest
from sqlalchemy.exc import IntegrityError

from quill.domain.value import LikeType, UserId, Username
from quill.persistence.repository.inmemory import (
    InMemoryBlogRepository,
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryStore,
    InMemoryUserRepository,
)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.mark.asyncio
async def test_duplicate_username_raises_integrity_error(store):
    repo = InMemoryUserRepository(store)
    await repo.create(Username("ada"), "hash")

    with pytest.raises(IntegrityError):
        await repo.create(Username("ada"), "other-hash")


@pytest.mark.asyncio
async def test_delete_blog_cascades(store):
    """Deleting a blog removes its comments and likes, not other blogs'."""
    blogs = InMemoryBlogRepository(store)
    comments = InMemoryCommentRepository(store)
    likes = InMemoryLikeRepository(store)

    doomed = await blogs.create(UserId(1), "Doomed", "Body")
    kept = await blogs.create(UserId(1), "Kept", "Body")
    await comments.create(doomed.id, UserId(2), "bye")
    await comments.create(kept.id, UserId(2), "hi")
    await likes.upsert(doomed.id, UserId(2), LikeType.LIKE)
    await likes.upsert(kept.id, UserId(2), LikeType.LIKE)

    assert await blogs.delete(doomed.id) is True

    assert await blogs.find_by_id(doomed.id) is None
    assert await comments.find_by_blog(doomed.id) == []
    assert await likes.count_by_blog(doomed.id, LikeType.LIKE) == 0
    assert len(await comments.find_by_blog(kept.id)) == 1
    assert await likes.count_by_blog(kept.id, LikeType.LIKE) == 1


@pytest.mark.asyncio
async def test_delete_missing_blog(store):
    assert await InMemoryBlogRepository(store).delete(123) is False


@pytest.mark.asyncio
async def test_find_all_newest_first_with_pagination(store):
    blogs = InMemoryBlogRepository(store)
    created = [await blogs.create(UserId(1), f"Blog {i}", "Body") for i in range(5)]

    page = await blogs.find_all(limit=2, offset=1)

    assert [b.id for b in page] == [created[3].id, created[2].id]


@pytest.mark.asyncio
async def test_comments_newest_first(store):
    comments = InMemoryCommentRepository(store)
    first = await comments.create(7, UserId(1), "first")
    second = await comments.create(7, UserId(2), "second")

    assert [c.id for c in await comments.find_by_blog(7)] == [second.id, first.id]
