"""Application entry point and FastAPI app factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.core.config import get_settings
from app.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events (startup/shutdown)."""
    # Startup: configure logging (app.log + stdout). AppServer logs the launch line after the bind.
    setup_logging()
    logger.debug("Lifespan startup complete")
    yield
    logger.debug("Lifespan shutdown complete")


def _get_cors_origins() -> list[str]:
    """Return list of allowed CORS origins from settings (empty when unset)."""
    settings = get_settings()
    return [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]


def create_app() -> FastAPI:
    """Build the FastAPI application with the controller routes wired in."""
    settings = get_settings()
    app = FastAPI(
        title=f"{settings.APP_NAME} - Event Management API",
        version=settings.APP_VERSION,
        description="Event Management backend.",
        lifespan=lifespan,
    )

    origins = _get_cors_origins()
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(api_router)
    return app


# ASGI entrypoint for uvicorn: `uvicorn app.main:app --port 8080`
app = create_app()
