"""End-to-end tests for signup, signin and credential handling."""

from datetime import UTC, datetime

import pytest
from dishka import Provider, Scope, provide

from quill.config import AuthSettings
from quill.domain.repository import BlogRepository
from quill.domain.value import UserId
from quill.util.jwt import create_token
from tests.harness import bearer, create_client, signup


class UnreachableBlogRepository(BlogRepository):
    """Blog repository that fails the test if any query reaches it."""

    async def find_by_id(self, blog_id):
        raise AssertionError("blog repository queried")

    async def find_all(self, limit=30, offset=0):
        raise AssertionError("blog repository queried")

    async def create(self, author_id, title, content, image_url=None):
        raise AssertionError("blog repository queried")

    async def save(self, blog):
        raise AssertionError("blog repository queried")

    async def delete(self, blog_id):
        raise AssertionError("blog repository queried")


class UnreachableBlogProvider(Provider):
    """Replaces the blog repository with ``UnreachableBlogRepository``."""

    @provide(scope=Scope.REQUEST)
    def get_blog_repository(self) -> BlogRepository:
        return UnreachableBlogRepository()


@pytest.fixture
def client():
    """Create test client."""
    return create_client()


class TestSignup:
    """Tests for POST /user/signup."""

    def test_signup_returns_token_and_id(self, client):
        # Act
        response = client.post(
            "/user/signup",
            json={"username": "ada", "password": "hunter22", "name": "Ada"},
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["token"]
        assert data["userId"] == 1

    def test_token_from_signup_authenticates(self, client):
        token = signup(client, "ada")["token"]

        response = client.get("/user/profile", headers=bearer(token))

        assert response.status_code == 200
        assert response.json()["username"] == "ada"

    def test_duplicate_username_conflicts(self, client):
        signup(client, "ada")

        response = client.post(
            "/user/signup", json={"username": "ada", "password": "other-pass"}
        )

        assert response.status_code == 409

    @pytest.mark.parametrize(
        "body",
        [
            {"username": "ab", "password": "hunter22"},
            {"username": "has space", "password": "hunter22"},
            {"username": "ada", "password": "short"},
            {"username": "ada"},
        ],
    )
    def test_invalid_body_is_bad_request(self, client, body):
        response = client.post("/user/signup", json=body)

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid request"
        assert response.json()["errors"]


class TestSignin:
    """Tests for POST /user/signin."""

    def test_signin_with_correct_password(self, client):
        created = signup(client, "ada", password="hunter22")

        response = client.post(
            "/user/signin", json={"username": "ada", "password": "hunter22"}
        )

        assert response.status_code == 200
        assert response.json()["userId"] == created["userId"]

    def test_wrong_password_and_unknown_user_look_the_same(self, client):
        signup(client, "ada")

        wrong_password = client.post(
            "/user/signin", json={"username": "ada", "password": "not-it"}
        )
        unknown_user = client.post(
            "/user/signin", json={"username": "bob", "password": "hunter22"}
        )

        assert wrong_password.status_code == 401
        assert unknown_user.status_code == 401
        assert wrong_password.json() == unknown_user.json()

    def test_short_password_is_bad_request(self, client):
        signup(client, "ada")

        response = client.post(
            "/user/signin", json={"username": "ada", "password": "abc"}
        )

        assert response.status_code == 400


class TestCredentials:
    """Tests for how the Authorization header is interpreted."""

    def test_bare_token_is_accepted(self, client):
        token = signup(client, "ada")["token"]

        response = client.get("/user/profile", headers={"Authorization": token})

        assert response.status_code == 200

    @pytest.mark.parametrize(
        "headers",
        [
            {},
            {"Authorization": "Bearer not-a-jwt"},
            {"Authorization": "not-a-jwt"},
        ],
    )
    def test_missing_or_malformed_token_is_unauthorized(self, client, headers):
        response = client.post(
            "/blog", json={"title": "T", "content": "C"}, headers=headers
        )

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_token_signed_with_other_secret_is_unauthorized(self, client):
        signup(client, "ada")
        token = create_token(
            UserId(1), AuthSettings(jwt_secret="other-secret"), datetime.now(UTC)
        )

        response = client.get("/user/profile", headers=bearer(token))

        assert response.status_code == 401

    def test_expired_token_is_unauthorized(self, client):
        signup(client, "ada")
        token = create_token(
            UserId(1),
            AuthSettings(jwt_secret="test-secret"),
            datetime(2020, 1, 1, tzinfo=UTC),
        )

        response = client.get("/user/profile", headers=bearer(token))

        assert response.status_code == 401

    def test_rejected_request_never_reaches_persistence(self):
        client = create_client(overrides=[UnreachableBlogProvider()])

        created = client.post("/blog", json={"title": "T", "content": "C"})
        updated = client.put(
            "/blog/1",
            json={"title": "T", "content": "C"},
            headers=bearer("garbage"),
        )
        deleted = client.delete("/blog/1")

        assert [created.status_code, updated.status_code, deleted.status_code] == [
            401,
            401,
            401,
        ]

    def test_authentication_is_checked_before_the_body(self, client):
        response = client.post("/blog", json={"title": "", "content": ""})

        assert response.status_code == 401
