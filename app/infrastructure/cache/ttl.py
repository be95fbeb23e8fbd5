"""In-memory TTL cache with request coalescing."""

import threading
import time
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from infrastructure.cache.key_builder import NAMESPACE_SEPARATOR
from infrastructure.logging import get_module_logger

logger = get_module_logger()

T = TypeVar("T")


@dataclass
class CacheEntry(Generic[T]):
    """A cached value and the time it was stored.

    Attributes:
        value: The cached payload.
        fetched_at: Clock reading (seconds) when the value was stored.
        ttl_seconds: Lifetime of the entry.
    """

    value: T
    fetched_at: float
    ttl_seconds: float

    def is_expired(self, now: float) -> bool:
        return now - self.fetched_at > self.ttl_seconds


class TTLCache(Generic[T]):
    """Thread-safe in-memory cache whose entries expire after a TTL.

    Expiry is checked on every read; there is no background eviction. An
    expired entry is dropped and treated as a miss.

    Concurrent get_or_fetch() calls for the same missing key are coalesced:
    the first caller runs the loader, the others wait for its result (or its
    exception). Failed loads are never cached.

    Usage:
        cache: TTLCache[list] = TTLCache()
        items = cache.get_or_fetch("media", 900, lambda: fetch_media())

    Attributes:
        clock: Callable returning the current time in seconds.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._entries: Dict[str, CacheEntry[T]] = {}
        self._in_flight: Dict[str, Future] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._coalesced = 0

    def get(self, key: str) -> Optional[T]:
        """Get a fresh cached value, or None if absent or expired."""
        with self._lock:
            entry = self._lookup(key)
            return entry.value if entry is not None else None

    def set(self, key: str, value: T, ttl_seconds: float) -> None:
        """Store a value for ttl_seconds from now."""
        with self._lock:
            self._entries[key] = CacheEntry(value, self.clock(), ttl_seconds)

    def get_or_fetch(
        self, key: str, ttl_seconds: float, loader: Callable[[], T]
    ) -> T:
        """Return the cached value for key, loading it on a miss.

        Args:
            key: Cache key.
            ttl_seconds: Lifetime of a newly loaded value.
            loader: Called without arguments to produce the value on a miss.

        Returns:
            The cached or freshly loaded value.

        Raises:
            Exception: Whatever the loader raised; nothing is cached.
        """
        with self._lock:
            entry = self._lookup(key)
            if entry is not None:
                self._hits += 1
                return entry.value

            future = self._in_flight.get(key)
            is_owner = future is None
            if is_owner:
                self._misses += 1
                future = Future()
                self._in_flight[key] = future
            else:
                self._coalesced += 1

        if not is_owner:
            logger.debug("cache_fetch_coalesced", key=key)
            return future.result()

        try:
            value = loader()
        except Exception as e:
            with self._lock:
                if self._in_flight.get(key) is future:
                    del self._in_flight[key]
            future.set_exception(e)
            raise

        with self._lock:
            # An invalidation during the load removes the in-flight marker;
            # the result is then handed to waiters but not stored.
            if self._in_flight.get(key) is future:
                del self._in_flight[key]
                self._entries[key] = CacheEntry(value, self.clock(), ttl_seconds)
        future.set_result(value)
        return value

    def invalidate(self, key: str) -> int:
        """Remove a key and every key namespaced under it.

        "translations" removes "translations" and all "translations:..." keys.

        Returns:
            Number of cached entries removed.
        """
        prefix = f"{key}{NAMESPACE_SEPARATOR}"
        with self._lock:
            matching = [k for k in self._entries if k == key or k.startswith(prefix)]
            for k in matching:
                del self._entries[k]
            for k in [k for k in self._in_flight if k == key or k.startswith(prefix)]:
                del self._in_flight[k]
        return len(matching)

    def clear(self) -> int:
        """Remove every entry.

        Returns:
            Number of cached entries removed.
        """
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
            self._in_flight.clear()
        return removed

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with entry count, hits, misses and coalesced waits.
        """
        with self._lock:
            return {
                "entries": len(self._entries),
                "in_flight": len(self._in_flight),
                "hits": self._hits,
                "misses": self._misses,
                "coalesced": self._coalesced,
            }

    def _lookup(self, key: str) -> Optional[CacheEntry[T]]:
        # Caller holds the lock
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self.clock()):
            del self._entries[key]
            return None
        return entry
