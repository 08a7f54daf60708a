"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from users_backend.api import create_api
from users_backend.database import DatabaseService
from users_backend.settings import BackendSettings, get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator

SQLITE_MEMORY_URL = "sqlite://"


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DATABASE_URL", SQLITE_MEMORY_URL)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> BackendSettings:
    return BackendSettings(database_url=SQLITE_MEMORY_URL, create_schema=True)


@pytest.fixture
def database(test_settings: BackendSettings) -> Iterator[DatabaseService]:
    db = DatabaseService(settings=test_settings)
    db.create_schema()
    yield db
    db.dispose()


@pytest.fixture
def client(database: DatabaseService, test_settings: BackendSettings) -> Iterator[TestClient]:
    app = create_api(database, settings=test_settings)
    with TestClient(app) as test_client:
        yield test_client
