"""Fixtures for API route tests."""

import pytest
from fastapi.testclient import TestClient

from api.router import api_router
from infrastructure.cache import TTLCache
from infrastructure.clients.content import ContentClient
from infrastructure.configuration import Settings
from infrastructure.services import get_content_client, get_settings
from utils.tests import create_test_app


@pytest.fixture
def test_settings(content_settings):
    return Settings(content=content_settings)


@pytest.fixture
def content_client(content_settings, mock_session):
    """Real ContentClient over a mock HTTP session."""
    return ContentClient(
        settings=content_settings, session=mock_session, cache=TTLCache()
    )


@pytest.fixture
def app(test_settings, content_client):
    return create_test_app(
        api_router,
        dependency_overrides={
            get_settings: lambda: test_settings,
            get_content_client: lambda: content_client,
        },
    )


@pytest.fixture
def client(app):
    return TestClient(app)
