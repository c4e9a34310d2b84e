import pytest
from fastapi.testclient import TestClient


@pytest.fixture(autouse=True)
def _fresh_settings():
    from customer_match.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client() -> TestClient:
    from customer_match.api.main import app

    with TestClient(app) as test_client:
        yield test_client
