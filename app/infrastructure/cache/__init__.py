"""Infrastructure in-memory cache.

Provides a TTL cache used to memoize content service responses.

Usage:

    from infrastructure.cache import TTLCache, build_cache_key

    cache = TTLCache()
    key = build_cache_key("translations", {"filters[isActive][$eq]": True})
    entries = cache.get_or_fetch(key, 300, load_translations)

    # Drop every translations entry
    cache.invalidate("translations")
"""

from infrastructure.cache.key_builder import (
    build_cache_key,
    encode_params,
    normalize_params,
)
from infrastructure.cache.ttl import CacheEntry, TTLCache

__all__ = [
    "CacheEntry",
    "TTLCache",
    "build_cache_key",
    "encode_params",
    "normalize_params",
]
