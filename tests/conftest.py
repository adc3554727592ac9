from unittest.mock import MagicMock, patch

import pytest

from auth0mgmt.core.client import Management


def build_response(status_code=200, json_body=None, text=None, headers=None, reason=""):
    """Create a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    response.reason = reason
    if json_body is None:
        response.text = text or ""
        response.json.side_effect = ValueError("No JSON")
    else:
        response.text = text if text is not None else "json"
        response.json.return_value = json_body
    return response


@pytest.fixture
def mock_request():
    """Patch requests.request in the transport module."""
    with patch("auth0mgmt.core.client.requests.request") as mock:
        mock.return_value = build_response(204)
        yield mock


@pytest.fixture
def mock_sleep():
    """Patch time.sleep in the transport module."""
    with patch("auth0mgmt.core.client.time.sleep") as mock:
        yield mock


@pytest.fixture
def management(mock_request, mock_sleep):
    """Management transport for a test tenant with pacing disabled."""
    return Management("test.auth0.com", "test_token", rate_limit=0)


@pytest.fixture
def mock_get_token():
    """Create a mock GetToken instance."""
    get_token = MagicMock()
    get_token.client_credentials = MagicMock(
        return_value={"access_token": "test_token", "expires_in": 86400}
    )
    return get_token


@pytest.fixture
def env_config():
    return {
        "domain": "test.auth0.com",
        "client_id": "test_client_id",
        "client_secret": "test_client_secret",
        "environment": "dev",
    }
