"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from fastapi.testclient import TestClient

from rolodex_backend.api import create_api
from rolodex_backend.database import DatabaseService, ResourceRepository, get_database
from rolodex_backend.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator

FIXTURES_DIR = Path(__file__).parent / "fixtures"
COLLECTIONS = ("users", "admins", "companies")


def load_fixture(name: str) -> list[dict[str, Any]]:
    """Read one of the JSON fixture collections."""
    return json.loads((FIXTURES_DIR / f"{name}.json").read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+pysqlite:///{tmp_path / 'rolodex.db'}")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def users() -> list[dict[str, Any]]:
    return load_fixture("users")


@pytest.fixture
def admins() -> list[dict[str, Any]]:
    return load_fixture("admins")


@pytest.fixture
def database() -> Iterator[DatabaseService]:
    """Database seeded with the user, admin and company fixtures."""
    service = DatabaseService()
    service.create_schema()
    with service.session() as session:
        repository = ResourceRepository(session)
        for collection in COLLECTIONS:
            repository.import_records(collection, load_fixture(collection))
    yield service
    with service.session() as session:
        repository = ResourceRepository(session)
        for collection in COLLECTIONS:
            repository.remove_all(collection)
    service.dispose()


@pytest.fixture
def client(database: DatabaseService) -> Iterator[TestClient]:
    app = create_api()
    app.dependency_overrides[get_database] = lambda: database
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
