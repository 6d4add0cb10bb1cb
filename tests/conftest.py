"""Shared fixtures for the students API tests."""

import os

import pytest
from fastapi.testclient import TestClient

# keep an accidental real startup away from the working directory
os.environ.setdefault("STORAGE_PATH", os.path.join("/tmp", "students-api-test", "storage.db"))

from fake_storage import BrokenStorage, InMemoryStorage  # noqa: E402
from students_api.config import Settings, get_settings  # noqa: E402
from students_api.database import SqliteStorage  # noqa: E402
from students_api.main import create_app  # noqa: E402


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def client(storage):
    app = create_app(storage=storage, settings=Settings(api_prefix=""))
    return TestClient(app)


@pytest.fixture
def broken_client():
    app = create_app(storage=BrokenStorage(), settings=Settings(api_prefix=""))
    return TestClient(app)


@pytest.fixture
def sqlite_storage(tmp_path):
    return SqliteStorage(str(tmp_path / "students.db"))


@pytest.fixture
def clean_settings():
    """Drop the cached settings so environment changes take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
