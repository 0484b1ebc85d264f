"""
Global pytest configuration and fixtures for all tests.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from snowhook.config.settings import Settings, get_settings
from snowhook.main import create_app
from tests.utils import MockFactory


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; keep environment changes test-local."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    return MockFactory.create_settings()


@pytest.fixture
def ticket_client() -> AsyncMock:
    """Ticket client that accepts every incident."""
    return MockFactory.create_ticket_client()


@pytest.fixture
def client(test_settings, ticket_client) -> TestClient:
    """Test client for an app wired to the mocked ticket client."""
    app = create_app(test_settings, ticket_client=ticket_client)
    return TestClient(app)
