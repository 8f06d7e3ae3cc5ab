import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("ATPROTO_SERVICE_URL", "https://appview.test")
os.environ.setdefault("HTTP_TIMEOUT_SECONDS", "5")
os.environ.setdefault("DEBUG", "false")

from listfresh.api.deps import get_gateway  # noqa: E402
from listfresh.config import get_settings  # noqa: E402
from listfresh.main import create_app  # noqa: E402
from tests.helpers import FakeGateway  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def gateway():
    return FakeGateway()


@pytest.fixture()
def client(gateway):
    app = create_app()
    app.dependency_overrides[get_gateway] = lambda: gateway
    with TestClient(app) as test_client:
        yield test_client
