"""Fixtures for content service client tests."""

import pytest

from infrastructure.cache import TTLCache
from infrastructure.clients.content import ContentClient


class FakeClock:
    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def content_client(content_settings, mock_session, clock):
    """ContentClient wired to a mock session and a controllable clock."""
    return ContentClient(
        settings=content_settings,
        session=mock_session,
        cache=TTLCache(clock=clock),
    )
