"""Session-scoped storage for the chosen language."""

from abc import ABC, abstractmethod
from typing import Dict, Optional


class SessionStorage(ABC):
    """Abstract key-value store scoped to a single client session.

    Implementations may raise on access (e.g. when the backing store is
    unavailable); callers decide whether that is fatal.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Get the stored value for key, or None if absent."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key if present."""
        pass


class InMemorySessionStorage(SessionStorage):
    """Dictionary-backed session storage."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)
