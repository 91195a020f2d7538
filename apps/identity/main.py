"""Identity API Application Entry Point.

Authentication and token issuance service (Clean Architecture).
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.identity.presentation.http.controllers.root_router import router as root_router
from apps.identity.presentation.http.errors.handlers import register_exception_handlers
from apps.identity.setup.config import get_settings
from apps.identity.setup.logging import setup_logging

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle."""
    logger.info("Starting Identity API")

    from apps.identity.infrastructure.persistence_postgres.mappings import start_all_mappers

    start_all_mappers()
    logger.info("ORM mappers initialized")

    yield

    logger.info("Shutting down Identity API")
    from apps.identity.infrastructure.persistence_postgres.session import dispose_engine
    from apps.identity.infrastructure.persistence_redis.client import close_redis_clients

    await dispose_engine()
    await close_redis_clients()


def create_app() -> FastAPI:
    """FastAPI application factory."""
    settings = get_settings()

    setup_logging("DEBUG" if settings.environment == "local" else "INFO")

    app = FastAPI(
        title=settings.app_name,
        description="OAuth authentication and token issuance",
        version=VERSION,
        lifespan=lifespan,
    )

    cors_origins = (
        [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]
        if settings.cors_origins
        else [settings.frontend_url]
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(root_router, prefix=settings.api_prefix)

    @app.get("/health")
    async def root_health():
        return {"status": "healthy", "service": "identity-api", "version": VERSION}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.identity.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
