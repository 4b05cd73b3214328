"""Tests for main API endpoints."""

from fastapi.testclient import TestClient


def test_root_endpoint(client: TestClient) -> None:
    """Test root endpoint returns welcome message."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to notecards API", "version": "0.1.0"}


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_docs_under_api_prefix(client: TestClient) -> None:
    """Test OpenAPI schema is served under the API prefix."""
    response = client.get("/api/v1/openapi.json")
    assert response.status_code == 200
    assert "/api/v1/generate-flashcards" in response.json()["paths"]


def test_validation_errors_outside_generation_keep_default_shape(client: TestClient) -> None:
    """Test other endpoints still report validation errors as 422 with detail."""
    response = client.post("/api/v1/flashcards", json={"notes": "n"})
    assert response.status_code == 422
    assert "detail" in response.json()
