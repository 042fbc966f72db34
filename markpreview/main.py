"""Main FastAPI application."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import markup_router
from .core.config import settings, ConfigurationError, Environment
from .core.logging_config import setup_logging
from .middleware.exception_handler import markup_exception_handler
from .middleware.request_context import RequestContextMiddleware
from .exceptions import MarkupException
from .services.markdown_service import (
    asciidoc_available,
    load_asciidoc_renderer,
    register_asciidoc_renderer,
)

# Setup logging first
setup_logging(log_level=settings.log_level, log_format=settings.log_format)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def _install_asciidoc_renderer() -> None:
    """Register the configured asciidoc renderer. Exits on a bad import path."""
    if not settings.asciidoc_renderer:
        logger.info("ASCIIDOC_RENDERER is empty; asciidoc rendering disabled")
        return

    try:
        renderer = load_asciidoc_renderer(settings.asciidoc_renderer)
    except (ImportError, AttributeError, TypeError) as e:
        logger.critical(
            "Cannot load asciidoc renderer.\n"
            f"  ASCIIDOC_RENDERER: {settings.asciidoc_renderer}\n"
            "  Expected 'package.module:callable' importable from this environment.\n"
            f"  Error: {e}"
        )
        raise SystemExit(1) from e

    register_asciidoc_renderer(renderer)
    logger.info(f"Asciidoc renderer loaded: {settings.asciidoc_renderer}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle for the markpreview API."""
    logger.info(f"Environment: {settings.environment.value}")
    try:
        settings.validate_production_config()
    except ConfigurationError as e:
        logger.critical(f"STARTUP BLOCKED: {e}")
        raise SystemExit(1) from e

    if settings.environment == Environment.DEVELOPMENT:
        origins = settings.get_cors_origins()
        localhost_origins = [o for o in origins if "localhost" in o or "127.0.0.1" in o]
        if localhost_origins:
            logger.warning(
                "CORS allows localhost origins: %s. Remove these for production.",
                localhost_origins,
            )

    _install_asciidoc_renderer()

    yield  # App runs here


# Create FastAPI app
app = FastAPI(
    title="markpreview API",
    description=(
        "Renders markdown and asciidoc to sanitized HTML and produces "
        "length-limited previews of rendered HTML for list views. "
        "Preview limits count visible characters only; markup is free."
    ),
    version=VERSION,
    license_info={"name": "MIT", "url": "https://opensource.org/licenses/MIT"},
    lifespan=lifespan,
)

# Middleware stack, outermost first: CORS wraps request context.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)
app.add_middleware(RequestContextMiddleware)

# Register exception handlers
app.add_exception_handler(MarkupException, markup_exception_handler)

logger.info(
    "markpreview API started | env=%s | preview_max_chars=%d | cors=%s",
    settings.environment.value,
    settings.preview_max_chars,
    ",".join(settings.get_cors_origins()),
)

# Include routers
app.include_router(markup_router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "name": "markpreview API",
        "version": VERSION,
        "status": "running"
    }


_startup_time = time.monotonic()


@app.get("/health")
def health_check():
    """Health check endpoint with uptime and renderer availability."""
    return {
        "status": "healthy",
        "uptime_seconds": round(time.monotonic() - _startup_time),
        "version": VERSION,
        "renderers": {
            "markdown": True,
            "asciidoc": asciidoc_available(),
        },
    }
