import hmac
import json

from fastapi import APIRouter, Header, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from api.dependencies.rate_limits import get_limiter
from infrastructure.logging import get_module_logger
from infrastructure.services import ContentClientDep, SettingsDep
from modules.webhooks.base import handle_webhook_payload


logger = get_module_logger()
router = APIRouter(tags=["Webhooks"])
limiter = get_limiter()


def is_valid_secret(provided: str | None, expected: str) -> bool:
    """Constant-time secret check. An unset expected secret accepts nothing."""
    if not expected or provided is None:
        return False
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


@router.post("/webhooks/content")
@limiter.limit("60/minute")
async def handle_content_webhook(
    request: Request,
    content: ContentClientDep,
    settings: SettingsDep,
    x_webhook_secret: str | None = Header(default=None),
):
    """Handle change notifications from the content service.

    Drops the cached content affected by the change so the next read
    fetches fresh data.

    Raises:
        HTTPException: 401 if the shared secret does not match, 500 if the
            body cannot be processed.
    Returns:
        dict: Acknowledgment with the event and content model.
    """
    if not is_valid_secret(x_webhook_secret, settings.content.CONTENT_WEBHOOK_SECRET):
        logger.warning(
            "content_webhook_unauthorized",
            header_present=x_webhook_secret is not None,
            ip_address=request.client.host if request.client else "unknown",
        )
        raise HTTPException(status_code=401, detail="Unauthorized")

    body = await request.body()
    try:
        payload_dict = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error("payload_validation_error", error=str(e))
        raise HTTPException(status_code=500, detail="Webhook processing failed") from e

    if not isinstance(payload_dict, dict):
        logger.error("payload_validation_error", error="Body is not a JSON object")
        raise HTTPException(status_code=500, detail="Webhook processing failed")

    webhook_result = await run_in_threadpool(
        handle_webhook_payload,
        payload_dict,
        content,
        settings.i18n.CRITICAL_TRANSLATION_KEYS,
    )
    if webhook_result.status == "error":
        raise HTTPException(status_code=500, detail="Webhook processing failed")

    logger.info(
        "content_webhook_processed",
        webhook_event=webhook_result.event,
        content_model=webhook_result.model,
        invalidated=webhook_result.invalidated,
        prewarmed=webhook_result.prewarmed,
    )
    return {
        "success": True,
        "message": "Webhook processed successfully",
        "event": webhook_result.event,
        "model": webhook_result.model,
    }


@router.api_route("/webhooks/content", methods=["GET", "PUT", "DELETE", "PATCH"])
def content_webhook_method_not_allowed():
    return JSONResponse(status_code=405, content={"error": "Method not allowed"})
