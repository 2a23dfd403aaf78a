"""Integration tests for the PostgreSQL repositories.

These run against a migrated database and are skipped unless
DATABASE__URL points at one.
"""

import os
from uuid import uuid4

import pytest

from quill.domain.repository import BlogRepository, LikeRepository, UserRepository
from quill.domain.value import LikeType, Username
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="requires a PostgreSQL database"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresRepositories:
    """Round trips through the real tables."""

    @pytest.mark.asyncio
    async def test_find_by_username_extracts_root_value(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        username = Username(f"user-{uuid4().hex[:12]}")

        created = await user_repo.create(username, "hash", name="Someone")
        found = await user_repo.find_by_username(username)

        assert found is not None
        assert found.id == created.id
        assert found.username == username

    @pytest.mark.asyncio
    async def test_like_upsert_keeps_one_row(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        blog_repo = await integration_env.get(BlogRepository)
        like_repo = await integration_env.get(LikeRepository)
        user = await user_repo.create(Username(f"user-{uuid4().hex[:12]}"), "hash")
        blog = await blog_repo.create(user.id, "Title", "Body")

        first = await like_repo.upsert(blog.id, user.id, LikeType.LIKE)
        second = await like_repo.upsert(blog.id, user.id, LikeType.DISLIKE)

        assert first.id == second.id
        assert await like_repo.count_by_blog(blog.id, LikeType.LIKE) == 0
        assert await like_repo.count_by_blog(blog.id, LikeType.DISLIKE) == 1

    @pytest.mark.asyncio
    async def test_blog_delete_cascades(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        blog_repo = await integration_env.get(BlogRepository)
        like_repo = await integration_env.get(LikeRepository)
        user = await user_repo.create(Username(f"user-{uuid4().hex[:12]}"), "hash")
        blog = await blog_repo.create(user.id, "Title", "Body")
        await like_repo.upsert(blog.id, user.id, LikeType.LIKE)

        assert await blog_repo.delete(blog.id) is True
        assert await blog_repo.find_by_id(blog.id) is None
        assert await like_repo.find_by_blog_and_user(blog.id, user.id) is None

    @pytest.mark.asyncio
    async def test_out_of_range_ids_are_missing(self, integration_env):
        blog_repo = await integration_env.get(BlogRepository)
        user_repo = await integration_env.get(UserRepository)
        like_repo = await integration_env.get(LikeRepository)
        huge_id = 3_000_000_000

        assert await blog_repo.find_by_id(huge_id) is None
        assert await blog_repo.delete(huge_id) is False
        assert await user_repo.find_by_id(huge_id) is None
        assert await like_repo.count_by_blog(huge_id, LikeType.LIKE) == 0
