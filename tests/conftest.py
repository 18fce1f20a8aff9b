import pytest
from fastapi.testclient import TestClient

from agriwaste.config.mock_db import MemoryStore
from agriwaste.core.settings import Settings
from agriwaste.main import create_app


class BrokenStore(MemoryStore):
    """Store whose every data operation fails, as a lost MongoDB connection would."""

    def _fail(self, *args, **kwargs):
        raise RuntimeError("connection refused")

    insert_report = _fail
    list_reports = _fail
    insert_organization = _fail
    insert_organizations = _fail
    find_organizations = _fail
    distinct_organization_values = _fail
    nearest_organization = _fail
    ping = _fail


@pytest.fixture
def settings() -> Settings:
    return Settings(USE_MOCK_DB=True, LOG_LEVEL="WARNING", MATCH_MAX_DISTANCE_METERS=30000)


@pytest.fixture
def store() -> MemoryStore:
    memory = MemoryStore()
    memory.connect()
    return memory


@pytest.fixture
def client(settings: Settings, store: MemoryStore) -> TestClient:
    return TestClient(create_app(settings=settings, store=store))


@pytest.fixture
def broken_client(settings: Settings) -> TestClient:
    broken = BrokenStore()
    broken.connect()
    return TestClient(create_app(settings=settings, store=broken))
