"""Tests for the health check endpoint."""

import pytest
from fastapi.testclient import TestClient

from user_registry.main import app
from user_registry.models.user import User, UserCreate
from user_registry.services import get_user_store
from user_registry.services.user_store import InMemoryUserStore


@pytest.mark.unit
def test_health_check(client: TestClient) -> None:
    """Test the health check endpoint returns 200."""
    response = client.get("/health")
    assert response.status_code == 200


@pytest.mark.unit
def test_health_check_response_schema(client: TestClient) -> None:
    """Test the health check endpoint response has correct schema."""
    client.post("/users", json={"name": "Ann", "email": "ann@x.com"})

    data = client.get("/health").json()

    assert data["status"] == "ok"
    assert data["version"] == "1.0.0"
    assert data["message"] == "API is healthy"
    assert data["users"] == 1


@pytest.mark.unit
def test_request_id_header(client: TestClient) -> None:
    response = client.get("/health", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"
    assert "X-Process-Time" in response.headers


@pytest.mark.unit
def test_docs_are_served(client: TestClient) -> None:
    """Swagger UI and the OpenAPI document describe the user routes."""
    assert client.get("/docs").status_code == 200

    schema = client.get("/openapi.json").json()
    assert schema["info"]["title"] == "User API"
    assert set(schema["paths"]["/users/{user_id}"]) == {"get", "put", "delete"}
    assert "post" in schema["paths"]["/users"]


class _CountOnlyStore(InMemoryUserStore):
    def list_users(self) -> list[User]:
        raise AssertionError("health check must not copy the collection")


@pytest.mark.unit
def test_health_counts_without_listing(client: TestClient) -> None:
    store = _CountOnlyStore()
    store.create_user(UserCreate(name="Ann", email="ann@x.com"))
    app.dependency_overrides[get_user_store] = lambda: store

    assert client.get("/health").json()["users"] == 1
