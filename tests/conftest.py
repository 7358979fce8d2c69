"""
pytest configuration and fixtures.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from workhours.app import create_app
from workhours.services import UserStore


@pytest.fixture
def store() -> UserStore:
    """Fresh, empty store per test."""
    return UserStore()


@pytest.fixture
def client(store: UserStore) -> Generator[TestClient, None, None]:
    """HTTP client for an app wired to the ``store`` fixture."""
    with TestClient(create_app(store)) as test_client:
        yield test_client
