import pytest
from fastapi.testclient import TestClient

from database import MemoryEventLog, get_event_log
from main import app
from schemas import UserProfile
from tests.factories import NOW, USER


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def log():
    store = MemoryEventLog()
    store.upsert_profile(UserProfile(anonymous_id=USER))
    return store


@pytest.fixture
def client(log):
    app.dependency_overrides[get_event_log] = lambda: log
    yield TestClient(app)
    app.dependency_overrides.clear()
