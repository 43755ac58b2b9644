import pytest

from app.core.config import Settings
from app.db.store import MemoryStore
from app.main import MockApi


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", latency_scale=0)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def api(store, settings) -> MockApi:
    return MockApi(store, settings)


@pytest.fixture
def empty_store() -> MemoryStore:
    return MemoryStore(fixtures={})


@pytest.fixture
def empty_api(empty_store, settings) -> MockApi:
    return MockApi(empty_store, settings)
