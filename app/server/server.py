from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.router import api_router
from api.dependencies.rate_limits import setup_rate_limiter
from infrastructure.services import get_settings
from server.lifespan import lifespan
from server.middleware import CorrelationIdMiddleware


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware and routes."""
    settings = get_settings()

    app = FastAPI(title="Content Service Gateway", lifespan=lifespan)
    setup_rate_limiter(app)

    allow_origins = ["*"] if settings.is_production else settings.server.ALLOWED_ORIGINS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(api_router)
    return app


handler = create_app()
