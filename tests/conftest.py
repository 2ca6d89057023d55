"""
Pytest configuration and fixtures for Adobe Commerce MCP Server tests.
"""

import pytest

from tests.fake_commerce import FakeAdobeCommerceAPI, make_client


@pytest.fixture
def client():
    """Provide a client using OAuth 1.0a against the fake REST base URL."""
    return make_client()


@pytest.fixture
def fake_api():
    """
    Provide a fake Adobe Commerce API context manager.

    Usage:
        def test_something(fake_api, client):
            with fake_api:
                # API calls will be mocked
                ...
    """
    return FakeAdobeCommerceAPI()


@pytest.fixture
def fake_api_active(fake_api):
    """
    Provide an already-activated fake Adobe Commerce API.

    The mock is automatically started and stopped.
    """
    with fake_api:
        yield fake_api


@pytest.fixture
def empty_api():
    """Provide a fake API with no products."""
    return FakeAdobeCommerceAPI(products=[])
