"""Fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from jobtrack.main import app
from jobtrack.services.dependencies import get_repository
from jobtrack.services.file_storage import LocalFileStorage, get_file_storage


@pytest.fixture
def test_client(memory_repository, tmp_path):
    """Test client wired to the in-memory repository and a temp upload dir."""
    app.dependency_overrides[get_repository] = lambda: memory_repository
    app.dependency_overrides[get_file_storage] = lambda: LocalFileStorage(
        tmp_path, "/files"
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def empty_client(empty_repository):
    """Test client for a user with no applications."""
    app.dependency_overrides[get_repository] = lambda: empty_repository
    yield TestClient(app)
    app.dependency_overrides.clear()
