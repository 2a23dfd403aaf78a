"""Unit tests for LikeService."""

import pytest

from quill.domain.service import LikeService
from quill.domain.value import BlogId, LikeType, UserId
from quill.persistence.repository.inmemory import InMemoryLikeRepository, InMemoryStore


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def service(store) -> LikeService:
    return LikeService(InMemoryLikeRepository(store))


class TestReact:
    """Tests for LikeService.react()."""

    @pytest.mark.asyncio
    async def test_react_twice_keeps_one_row_with_latest_type(self, service, store):
        """LIKE then DISLIKE from one user leaves a single DISLIKE."""
        first = await service.react(BlogId(7), UserId(42), LikeType.LIKE)
        second = await service.react(BlogId(7), UserId(42), LikeType.DISLIKE)

        assert len(store.likes) == 1
        assert second.id == first.id
        assert second.type == LikeType.DISLIKE

        counts = await service.count(BlogId(7))
        assert (counts.likes, counts.dislikes) == (0, 1)

    @pytest.mark.asyncio
    async def test_counts_per_user(self, service):
        """Each user contributes at most one reaction."""
        await service.react(BlogId(7), UserId(1), LikeType.LIKE)
        await service.react(BlogId(7), UserId(2), LikeType.LIKE)
        await service.react(BlogId(7), UserId(3), LikeType.DISLIKE)
        await service.react(BlogId(8), UserId(1), LikeType.DISLIKE)

        counts = await service.count(BlogId(7))
        assert (counts.likes, counts.dislikes) == (2, 1)


class TestGetUserReaction:
    """Tests for LikeService.get_user_reaction()."""

    @pytest.mark.asyncio
    async def test_anonymous_has_no_reaction(self, service):
        await service.react(BlogId(7), UserId(1), LikeType.LIKE)

        assert await service.get_user_reaction(BlogId(7), None) is None

    @pytest.mark.asyncio
    async def test_own_reaction(self, service):
        await service.react(BlogId(7), UserId(1), LikeType.DISLIKE)

        like = await service.get_user_reaction(BlogId(7), UserId(1))
        assert like.type == LikeType.DISLIKE
