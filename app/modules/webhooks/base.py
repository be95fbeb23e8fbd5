"""Content webhook dispatch.

Validates change notifications from the content service and routes them to
the invalidation handler for the changed content type."""
from typing import Any, Dict, Iterable, Optional

from pydantic import ValidationError
from infrastructure.clients.content import ContentClient
from infrastructure.logging import get_module_logger
from models.webhooks import ContentWebhookPayload, WebhookResult
from modules.webhooks.content import (
    process_media_change,
    process_navigation_change,
    process_translation_change,
)

logger = get_module_logger()

def validate_payload(payload_dict: Dict[str, Any]) -> Optional[ContentWebhookPayload]:
    """
    Validate an incoming webhook body against the content event model.

    Args:
        payload_dict (dict): The decoded webhook body.

    Returns:
        Optional[ContentWebhookPayload]: The validated payload, or None if
            validation fails.
    """
    try:
        payload = ContentWebhookPayload.model_validate(payload_dict)
    except ValidationError as e:
        logger.error("payload_validation_failure", error=str(e))
        return None
    logger.info(
        "payload_validation_success",
        webhook_event=payload.event,
        content_model=payload.model,
        entry_id=payload.entry.get("id"),
    )
    return payload


def handle_webhook_payload(
    payload_dict: Dict[str, Any],
    client: ContentClient,
    critical_keys: Iterable[str] = (),
) -> WebhookResult:
    """Process a content change notification.

    Returns:
        WebhookResult: status "success" once the matching caches are dropped
            (also for content types that have no cache), "error" when the
            payload is not a content event.
    """
    payload = validate_payload(payload_dict)
    if payload is None:
        return WebhookResult(status="error", message="Invalid content webhook payload")

    match payload.model:
        case "translation":
            webhook_result = process_translation_change(payload, client, critical_keys)
        case "navigation-item":
            webhook_result = process_navigation_change(payload, client)
        case "media":
            webhook_result = process_media_change(payload, client)
        case _:
            logger.info(
                "content_model_ignored",
                webhook_event=payload.event,
                content_model=payload.model,
            )
            webhook_result = WebhookResult(
                status="success", event=payload.event, model=payload.model
            )

    return webhook_result
