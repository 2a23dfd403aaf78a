"""End-to-end tests for the health check."""

from tests.harness import create_client


def test_health():
    client = create_client()

    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["environment"] == "test"
