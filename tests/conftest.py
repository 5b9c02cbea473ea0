# tests/conftest.py
import json
import pytest

from shopify_carriers.core.config import clear_settings_cache
from tests.mocks import MockData
from tests.mocks.mock_transport import MockTransport


@pytest.fixture(autouse=True)
def shopify_env(monkeypatch, tmp_path):
    """Provide test settings through the environment, away from any local .env"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SHOPIFY_SHOP_URL", "fooshop")
    monkeypatch.setenv("SHOPIFY_ADMIN_API_ACCESS_TOKEN", "test_token")
    monkeypatch.setenv("SHOPIFY_API_VERSION", "2024-01")
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def carrier_data():
    return MockData.get_carrier_service()


@pytest.fixture
def mock_transport():
    return MockTransport()


@pytest.fixture
def mock_session(mocker):
    """A requests.Session stand-in; set .request.return_value per test"""
    return mocker.MagicMock()


@pytest.fixture
def make_response(mocker):
    """Build a fake requests.Response"""
    def _make(status_code=200, body=None, reason="OK"):
        response = mocker.MagicMock()
        response.status_code = status_code
        response.reason = reason
        if body is None:
            response.content = b""
            response.json.side_effect = ValueError("No JSON")
        elif isinstance(body, (bytes, str)):
            response.content = body.encode() if isinstance(body, str) else body
            response.json.side_effect = ValueError("Invalid JSON")
        else:
            response.content = json.dumps(body).encode()
            response.json.return_value = body
        return response
    return _make
