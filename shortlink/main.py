"""Shortlink Service - Main FastAPI Application.

A small URL shortening edge service:
- Create short links (POST /v1/short)
- Redirect short codes to their long URLs (GET /{short_code})

Short codes are the salted Hashids encoding of the link's row id, so the
service refuses to start without HASH_SECRET.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Settings, get_settings
from .core.exceptions import ConfigurationError
from .api.errors import error_response
from .api.routes import health_router, links_router
from .services.links import ErrorKind, LinkService

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Application settings. Loaded from the environment if omitted.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup and shutdown events."""
        # Startup
        logger.info(f"Starting {settings.app_title}...")
        service = LinkService.from_settings(settings)
        service.db.init_db()
        if settings.backfill_on_startup_limit > 0:
            service.backfill_missing_codes(settings.backfill_on_startup_limit)
        app.state.link_service = service
        logger.info("Database initialized")
        yield
        # Shutdown
        logger.info(f"Shutting down {settings.app_title}...")
        service.db.close()
        app.state.link_service = None

    app = FastAPI(
        title=settings.app_title,
        description=settings.app_description,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
        max_age=settings.cors_max_age,
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Report malformed request bodies as client errors."""
        logger.info(f"Rejected request body on {request.url.path}")
        return error_response(ErrorKind.VALIDATION, "Invalid request body")

    @app.exception_handler(ConfigurationError)
    async def configuration_exception_handler(request: Request, exc: ConfigurationError):
        """Configuration exception handler."""
        logger.error(f"Configuration error: {exc}")
        return error_response(ErrorKind.CONFIGURATION, "Service is not configured")

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """General exception handler."""
        logger.error(f"Unhandled Exception: {exc}")
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "error_code": "internal_error"},
        )

    # Health first so "/health" is not taken for a short code
    app.include_router(health_router)
    app.include_router(links_router)

    return app


app = create_app()


def run() -> None:
    """Run the service with uvicorn."""
    uvicorn.run("shortlink.main:app", host="0.0.0.0", port=8787, log_level="info")


if __name__ == "__main__":
    run()
