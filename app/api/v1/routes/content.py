from fastapi import APIRouter, Request

from api.dependencies.rate_limits import get_limiter
from infrastructure.services import ContentClientDep

router = APIRouter(tags=["Content"])
limiter = get_limiter()


@router.get("/content/health")
@limiter.limit("30/minute")
def content_health(request: Request, content: ContentClientDep):  # pylint: disable=unused-argument
    """Report whether the content service accepts our credentials."""
    return content.health_check().model_dump()
