"""End-to-end tests for the caller's profile."""

from datetime import UTC, datetime

import pytest

from quill.config import AuthSettings
from quill.domain.value import UserId
from quill.util.jwt import create_token
from tests.harness import bearer, create_client, signup


@pytest.fixture
def client():
    """Create test client."""
    return create_client()


class TestProfile:
    """Tests for GET/PUT /user/profile."""

    def test_profile_never_exposes_password_hash(self, client):
        token = signup(client, "ada")["token"]

        response = client.get("/user/profile", headers=bearer(token))

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"id", "username", "name", "bio", "avatarUrl", "createdAt"}
        assert "$2b$" not in response.text

    def test_update_profile(self, client):
        token = signup(client, "ada")["token"]

        response = client.put(
            "/user/profile",
            json={"name": "Ada Lovelace", "bio": "Engines", "avatarUrl": "https://a/b.png"},
            headers=bearer(token),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Ada Lovelace"
        assert data["bio"] == "Engines"
        assert data["avatarUrl"] == "https://a/b.png"

    def test_password_change_takes_effect(self, client):
        token = signup(client, "ada", password="hunter22")["token"]

        client.put(
            "/user/profile", json={"password": "correct-horse"}, headers=bearer(token)
        )

        old = client.post("/user/signin", json={"username": "ada", "password": "hunter22"})
        new = client.post(
            "/user/signin", json={"username": "ada", "password": "correct-horse"}
        )
        assert old.status_code == 401
        assert new.status_code == 200

    def test_profile_requires_token(self, client):
        response = client.get("/user/profile")

        assert response.status_code == 401

    def test_valid_token_for_unknown_account(self, client):
        token = create_token(
            UserId(99), AuthSettings(jwt_secret="test-secret"), datetime.now(UTC)
        )

        response = client.get("/user/profile", headers=bearer(token))

        assert response.status_code == 404
