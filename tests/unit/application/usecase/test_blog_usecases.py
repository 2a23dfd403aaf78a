"""Unit tests for blog use cases."""

import pytest

from quill.application.usecase.blog import (
    CreateBlogRequest,
    CreateBlogUseCase,
    DeleteBlogRequest,
    DeleteBlogUseCase,
    GetBlogRequest,
    GetBlogUseCase,
    ListBlogsRequest,
    ListBlogsUseCase,
    UpdateBlogRequest,
    UpdateBlogUseCase,
)
from quill.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from quill.domain.error import NotAuthorizedError, NotFoundError
from quill.domain.repository import BlogRepository, CommentRepository
from quill.domain.service import UserService
from quill.domain.value import Username
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _create_blog(env, author_id: int, title: str = "Title") -> int:
    use_case = await env.get(CreateBlogUseCase)
    response = await use_case.execute(
        CreateBlogRequest(author_id=author_id, title=title, content="Body")
    )
    return response.id


class TestUpdateBlog:
    """Tests for UpdateBlogUseCase."""

    @pytest.mark.asyncio
    async def test_author_can_update(self, unit_env):
        blog_id = await _create_blog(unit_env, author_id=1)
        use_case = await unit_env.get(UpdateBlogUseCase)

        response = await use_case.execute(
            UpdateBlogRequest(blog_id=blog_id, user_id=1, title="New", content="Text")
        )

        repo = await unit_env.get(BlogRepository)
        blog = await repo.find_by_id(response.id)
        assert (blog.title, blog.content) == ("New", "Text")
        assert blog.author_id == 1

    @pytest.mark.asyncio
    async def test_non_author_is_refused_and_blog_unchanged(self, unit_env):
        blog_id = await _create_blog(unit_env, author_id=1, title="Original")
        use_case = await unit_env.get(UpdateBlogUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateBlogRequest(blog_id=blog_id, user_id=2, title="X", content="Y")
            )

        repo = await unit_env.get(BlogRepository)
        assert (await repo.find_by_id(blog_id)).title == "Original"

    @pytest.mark.asyncio
    async def test_missing_blog_is_not_found(self, unit_env):
        use_case = await unit_env.get(UpdateBlogUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateBlogRequest(blog_id=999, user_id=1, title="X", content="Y")
            )


class TestDeleteBlog:
    """Tests for DeleteBlogUseCase."""

    @pytest.mark.asyncio
    async def test_author_delete_removes_comments(self, unit_env):
        blog_id = await _create_blog(unit_env, author_id=1)
        create_comment = await unit_env.get(CreateCommentUseCase)
        await create_comment.execute(
            CreateCommentRequest(blog_id=blog_id, user_id=2, content="hi")
        )
        use_case = await unit_env.get(DeleteBlogUseCase)

        response = await use_case.execute(DeleteBlogRequest(blog_id=blog_id, user_id=1))

        assert response.deleted is True
        comments = await unit_env.get(CommentRepository)
        assert await comments.find_by_blog(blog_id) == []

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env):
        blog_id = await _create_blog(unit_env, author_id=1)
        use_case = await unit_env.get(DeleteBlogUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(DeleteBlogRequest(blog_id=blog_id, user_id=2))

        repo = await unit_env.get(BlogRepository)
        assert await repo.find_by_id(blog_id) is not None


class TestReadBlogs:
    """Tests for GetBlogUseCase and ListBlogsUseCase."""

    @pytest.mark.asyncio
    async def test_get_includes_author(self, unit_env):
        user_service = await unit_env.get(UserService)
        author = await user_service.register(Username("ada"), "hunter22", name="Ada")
        blog_id = await _create_blog(unit_env, author_id=author.id)
        use_case = await unit_env.get(GetBlogUseCase)

        response = await use_case.execute(GetBlogRequest(blog_id=blog_id))

        assert response.blog.author.name == "Ada"

    @pytest.mark.asyncio
    async def test_get_missing(self, unit_env):
        use_case = await unit_env.get(GetBlogUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetBlogRequest(blog_id=1))

    @pytest.mark.asyncio
    async def test_list_newest_first(self, unit_env):
        first = await _create_blog(unit_env, author_id=1, title="First")
        second = await _create_blog(unit_env, author_id=1, title="Second")
        use_case = await unit_env.get(ListBlogsUseCase)

        response = await use_case.execute(ListBlogsRequest())

        assert [b.id for b in response.blogs] == [second, first]
