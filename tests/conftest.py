import pytest
from fastapi.testclient import TestClient

from app.cache import cache_clear
from app.config import settings
from app.main import app, _buckets


@pytest.fixture(autouse=True)
def _reset_state():
    _buckets.clear()
    cache_clear()
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def auth():
    return {"X-API-Key": settings.api_key}
