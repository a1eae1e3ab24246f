"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from user_registry.main import app
from user_registry.services import get_user_store
from user_registry.services.user_store import InMemoryUserStore


@pytest.fixture
def store() -> InMemoryUserStore:
    """Create an empty user store."""
    return InMemoryUserStore()


@pytest.fixture
def client(store: InMemoryUserStore) -> Iterator[TestClient]:
    """Create a FastAPI test client backed by the ``store`` fixture."""
    app.dependency_overrides[get_user_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
