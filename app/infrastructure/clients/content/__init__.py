"""Content service (headless CMS) client for infrastructure layer.

Public API (Package Level):
- ContentClient: Cached client for translations, navigation and media
- ContentServiceError and subclasses: Fetch failures
- TranslationEntry, MediaEntry, NavigationItem: Content record models

Note: Application code should import from infrastructure.services, not directly from this package.

Developer Usage (Recommended):
    from infrastructure.services import ContentClientDep

    @router.get("/labels")
    def labels(content: ContentClientDep):
        return content.resolve_many(["nav.courses", "nav.blog"], "en")
"""

from infrastructure.clients.content.client import (
    MEDIA,
    NAVIGATION,
    NAVIGATION_ITEMS,
    TRANSLATIONS,
    ContentClient,
    build_navigation_tree,
)
from infrastructure.clients.content.errors import (
    ContentConnectionError,
    ContentFetchError,
    ContentServiceError,
    ContentTimeoutError,
)
from infrastructure.clients.content.models import (
    ContentRecord,
    HealthStatus,
    MediaEntry,
    MediaMetadata,
    NavigationItem,
    TranslationEntry,
)

__all__ = [
    "ContentClient",
    "build_navigation_tree",
    "TRANSLATIONS",
    "NAVIGATION_ITEMS",
    "NAVIGATION",
    "MEDIA",
    "ContentServiceError",
    "ContentFetchError",
    "ContentTimeoutError",
    "ContentConnectionError",
    "ContentRecord",
    "HealthStatus",
    "MediaEntry",
    "MediaMetadata",
    "NavigationItem",
    "TranslationEntry",
]
