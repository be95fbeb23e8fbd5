import sys
from pathlib import Path
from unittest.mock import MagicMock

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.configuration`) works during pytest collection
# regardless of the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
import requests

from infrastructure.configuration import ContentServiceSettings


@pytest.fixture
def content_settings():
    """Content service settings independent of the local environment."""
    return ContentServiceSettings(
        CONTENT_SERVICE_URL="http://cms.test",
        CONTENT_SERVICE_API_TOKEN="test-token",
        CONTENT_SERVICE_TIMEOUT_SECONDS=10.0,
        CONTENT_WEBHOOK_SECRET="test-secret",
        TRANSLATIONS_CACHE_TTL_SECONDS=300,
        NAVIGATION_CACHE_TTL_SECONDS=600,
        MEDIA_CACHE_TTL_SECONDS=900,
        CONTENT_PAGE_SIZE=100,
    )


@pytest.fixture
def mock_session():
    """requests.Session double; set .get.return_value per test."""
    return MagicMock(spec=requests.Session)
