from fastapi import APIRouter
from api.v1.routes.content import router as content_router
from api.v1.routes.i18n import router as i18n_router
from api.v1.routes.webhooks import router as webhooks_router


# Main v1 router (includes all endpoints)
router = APIRouter()
router.include_router(i18n_router)
router.include_router(content_router)
router.include_router(webhooks_router)
