"""Test configuration and fixtures."""

import os
from unittest.mock import MagicMock

import pytest
import requests

from core.dependencies import clear_settings
from core.settings import Settings
from payments.nvp_client import NVPClient


class MockResponse:
    """Stand-in for requests.Response carrying a raw NVP body."""

    def __init__(self, body=b"", status_code=200):
        self.status_code = status_code
        self.content = body.encode() if isinstance(body, str) else body
        self.text = self.content.decode("utf-8", errors="replace")


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment variables before each test."""
    original_env = dict(os.environ)

    os.environ.update(
        {
            "ENVIRONMENT": "test",
            "DISABLE_TRACING": "true",
            "METRICS_ENABLED": "true",
        }
    )
    clear_settings()

    yield

    clear_settings()
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def mock_settings():
    return Settings(
        NVP_VERSION="204",
        HTTP_TIMEOUT=12.5,
        USER_AGENT="nvp-gateway-tests",
        ENVIRONMENT="test",
    )


@pytest.fixture
def mock_session():
    """requests.Session double; set .post.return_value or .post.side_effect."""
    session = MagicMock(spec=requests.Session)
    session.post.return_value = MockResponse("ACK=Success")
    return session


@pytest.fixture
def paypal_client(mock_session, mock_settings):
    return NVPClient.paypal(
        "merchant_api1.example.com",
        "s3cr3t",
        "SIGNATURE-ABC",
        sandbox=True,
        session=mock_session,
        settings=mock_settings,
    )


@pytest.fixture
def payflow_client(mock_session, mock_settings):
    return NVPClient.payflow(
        "merchantuser",
        "pf-pass",
        "PayPal",
        "merchantvendor",
        sandbox=True,
        session=mock_session,
        settings=mock_settings,
    )


def sent_fields(mock_session):
    """Decode the form body of the last POST made through mock_session."""
    from payments.parser import parse_response

    _, kwargs = mock_session.post.call_args
    return parse_response(kwargs["data"])
