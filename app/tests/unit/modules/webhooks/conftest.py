"""Fixtures for content webhook tests."""

from unittest.mock import MagicMock

import pytest

from infrastructure.clients.content import ContentClient, TranslationEntry


@pytest.fixture
def mock_content_client():
    client = MagicMock(spec=ContentClient)
    client.invalidate.return_value = 1
    client.get_translations.return_value = [
        TranslationEntry(key="nav.courses", ru="Курсы"),
        TranslationEntry(key="nav.blog", ru="Блог"),
    ]
    client.get_navigation_items.return_value = []
    return client


def make_payload(model="translation", event="entry.update", **extra):
    payload = {
        "event": event,
        "createdAt": "2025-01-01T00:00:00.000Z",
        "model": model,
        "entry": {"id": 1, "key": "nav.courses"},
    }
    payload.update(extra)
    return payload


@pytest.fixture
def payload_factory():
    return make_payload
