"""Tests for API middleware."""

import pytest
from fastapi.testclient import TestClient

from product_catalog.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


class TestRequestIdMiddleware:
    """Tests for request ID correlation middleware."""

    def test_generates_request_id_if_not_provided(self, client: TestClient) -> None:
        """Should generate request ID if not in request headers."""
        response = client.get("/health")
        assert response.status_code == 200
        assert "X-Request-ID" in response.headers
        # UUID format
        request_id = response.headers["X-Request-ID"]
        assert len(request_id) == 36

    def test_uses_provided_request_id(self, client: TestClient) -> None:
        """Should use request ID from request headers."""
        custom_id = "custom-request-id-12345"
        response = client.get(
            "/health",
            headers={"X-Request-ID": custom_id},
        )
        assert response.status_code == 200
        assert response.headers["X-Request-ID"] == custom_id

    def test_validation_errors_carry_request_id(self, client: TestClient) -> None:
        """Error responses are correlated too."""
        response = client.delete(
            "/products/not-a-uuid",
            headers={"X-Request-ID": "req-422"},
        )
        assert response.status_code == 422
        assert response.headers["X-Request-ID"] == "req-422"
