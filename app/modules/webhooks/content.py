"""Cache invalidation for content service change events."""

from typing import Iterable, List

from infrastructure.clients.content import (
    MEDIA,
    NAVIGATION,
    NAVIGATION_ITEMS,
    TRANSLATIONS,
    ContentClient,
    ContentServiceError,
)
from infrastructure.logging import get_module_logger
from models.webhooks import ContentWebhookPayload, WebhookResult

logger = get_module_logger()

PUBLISH_EVENT = "entry.publish"


def process_translation_change(
    payload: ContentWebhookPayload,
    client: ContentClient,
    critical_keys: Iterable[str],
) -> WebhookResult:
    """Drop cached translations and re-fetch them after a publish."""
    client.invalidate(TRANSLATIONS)
    prewarmed = False
    if payload.event == PUBLISH_EVENT:
        prewarmed = prewarm_translations(client, critical_keys)
    return WebhookResult(
        status="success",
        event=payload.event,
        model=payload.model,
        invalidated=[TRANSLATIONS],
        prewarmed=prewarmed,
    )


def process_navigation_change(
    payload: ContentWebhookPayload, client: ContentClient
) -> WebhookResult:
    """Drop cached navigation items and document; rebuild the tree on publish."""
    client.invalidate(NAVIGATION_ITEMS)
    client.invalidate(NAVIGATION)
    prewarmed = False
    if payload.event == PUBLISH_EVENT:
        prewarmed = prewarm_navigation(client)
    return WebhookResult(
        status="success",
        event=payload.event,
        model=payload.model,
        invalidated=[NAVIGATION_ITEMS, NAVIGATION],
        prewarmed=prewarmed,
    )


def process_media_change(
    payload: ContentWebhookPayload, client: ContentClient
) -> WebhookResult:
    client.invalidate(MEDIA)
    return WebhookResult(
        status="success",
        event=payload.event,
        model=payload.model,
        invalidated=[MEDIA],
    )


def prewarm_translations(client: ContentClient, critical_keys: Iterable[str]) -> bool:
    """Reload the translation collection and report missing critical keys.

    Failures are logged; the cache simply stays cold until the next read.

    Returns:
        True if the collection was reloaded.
    """
    try:
        entries = client.get_translations()
    except ContentServiceError as e:
        logger.error("translations_prewarm_failed", error=str(e))
        return False

    available = {entry.key for entry in entries}
    missing: List[str] = [key for key in critical_keys if key not in available]
    if missing:
        logger.warning("critical_translation_keys_missing", keys=missing)
    logger.info(
        "translations_prewarmed", entry_count=len(entries), missing_count=len(missing)
    )
    return True


def prewarm_navigation(client: ContentClient) -> bool:
    try:
        roots = client.get_navigation_items()
    except ContentServiceError as e:
        logger.error("navigation_prewarm_failed", error=str(e))
        return False
    logger.info("navigation_prewarmed", root_count=len(roots))
    return True
