"""End-to-end tests for comment routes."""

import pytest

from tests.harness import bearer, create_client, signup


@pytest.fixture
def client():
    """Create test client."""
    return create_client()


@pytest.fixture
def blog_id(client):
    """A blog published by "author"."""
    token = signup(client, "author")["token"]
    response = client.post(
        "/blog", json={"title": "Hello", "content": "World"}, headers=bearer(token)
    )
    return response.json()["id"]


class TestComments:
    """Tests for /blog/{id}/comment."""

    def test_comment_is_attributed_to_caller(self, client, blog_id):
        ada = signup(client, "ada")

        response = client.post(
            f"/blog/{blog_id}/comment",
            json={"content": "hi"},
            headers=bearer(ada["token"]),
        )

        assert response.status_code == 201
        comment = response.json()["comment"]
        assert comment["userId"] == ada["userId"]
        assert comment["blogId"] == blog_id
        assert comment["content"] == "hi"

    def test_listing_is_public_and_newest_first(self, client, blog_id):
        token = signup(client, "ada")["token"]
        for text in ("first", "second"):
            client.post(
                f"/blog/{blog_id}/comment", json={"content": text}, headers=bearer(token)
            )

        response = client.get(f"/blog/{blog_id}/comment")

        assert response.status_code == 200
        assert [c["content"] for c in response.json()["comments"]] == [
            "second",
            "first",
        ]

    def test_comment_on_missing_blog(self, client):
        token = signup(client, "ada")["token"]

        response = client.post(
            "/blog/7/comment", json={"content": "hi"}, headers=bearer(token)
        )

        assert response.status_code == 404

    def test_empty_comment_is_bad_request(self, client, blog_id):
        token = signup(client, "ada")["token"]

        response = client.post(
            f"/blog/{blog_id}/comment", json={"content": ""}, headers=bearer(token)
        )

        assert response.status_code == 400

    def test_only_the_writer_can_delete(self, client, blog_id):
        ada = signup(client, "ada")["token"]
        bob = signup(client, "bob")["token"]
        comment_id = client.post(
            f"/blog/{blog_id}/comment", json={"content": "hi"}, headers=bearer(ada)
        ).json()["comment"]["id"]

        forbidden = client.delete(
            f"/blog/{blog_id}/comment/{comment_id}", headers=bearer(bob)
        )
        allowed = client.delete(
            f"/blog/{blog_id}/comment/{comment_id}", headers=bearer(ada)
        )
        again = client.delete(
            f"/blog/{blog_id}/comment/{comment_id}", headers=bearer(ada)
        )

        assert forbidden.status_code == 403
        assert allowed.status_code == 200
        assert again.status_code == 404

    def test_missing_comment_is_not_found_for_any_caller(self, client, blog_id):
        # Neither the blog author nor a stranger learns more than 404
        bob = signup(client, "bob")["token"]

        response = client.delete(f"/blog/{blog_id}/comment/999", headers=bearer(bob))

        assert response.status_code == 404
