"""Feature-level fixtures for i18n system tests."""

import pytest

from infrastructure.i18n import InMemorySessionStorage, LanguageRegistry


class FailingStorage(InMemorySessionStorage):
    """Session storage whose reads and/or writes raise."""

    def __init__(self, fail_reads=False, fail_writes=False):
        super().__init__()
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes

    def get_item(self, key):
        if self.fail_reads:
            raise RuntimeError("storage unavailable")
        return super().get_item(key)

    def set_item(self, key, value):
        if self.fail_writes:
            raise RuntimeError("quota exceeded")
        super().set_item(key, value)


@pytest.fixture
def registry():
    return LanguageRegistry()


@pytest.fixture
def storage():
    return InMemorySessionStorage()


@pytest.fixture
def failing_storage_factory():
    return FailingStorage
