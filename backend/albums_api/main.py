"""
Album Catalog API - FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn albums_api.main:app)
       and by tests that need an app around a specific catalog or settings.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │  Middleware: Request ID → Logging → GZip → CORS     │
    │              → Fault Isolation                      │
    ├─────────────────────────────────────────────────────┤
    │  Exception handlers: HTTPException, AlbumsAPIError  │
    ├─────────────────────────────────────────────────────┤
    │  Routes: GET /albums, GET /health                   │
    ├─────────────────────────────────────────────────────┤
    │  app.state: settings, catalog (built once)          │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from albums_api import __version__
from albums_api.config import Settings, settings as default_settings
from albums_api.exceptions import AlbumsAPIError
from albums_api.middleware.fault import FaultIsolationMiddleware
from albums_api.middleware.logging import RequestLoggingMiddleware
from albums_api.middleware.request_id import RequestIDMiddleware, request_id_var
from albums_api.responses import error_response
from albums_api.routes import albums, health
from albums_api.services.catalog import Catalog, default_catalog

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    When:   Called once during app startup, before anything logs.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and report what was loaded.
    Shutdown: log it. The catalog holds no external resources to release.
    """
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)
    logger.info("=" * 60)
    logger.info("%s %s starting up...", app_settings.app_name, __version__)
    logger.info("Catalog loaded: %d albums", len(app.state.catalog))
    logger.info(
        "Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port
    )
    logger.info("=" * 60)

    yield

    logger.info("%s shutting down...", app_settings.app_name)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI, app_settings: Settings) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler map:
        HTTPException (404)     → not_found, body from NOT_FOUND_TEXT in plain style
        HTTPException (other)   → http_error, status preserved
        AlbumsAPIError          → exc.status_code / exc.error_code
        anything else           → FaultIsolationMiddleware (500)

    Internal details (exception text, tracebacks) never reach the client.
    """

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """Routing-level errors: unknown path, wrong method."""
        if exc.status_code == 404:
            response = error_response(
                app_settings,
                status_code=404,
                error="not_found",
                message=app_settings.not_found_text,
                plain_text=app_settings.not_found_text,
            )
        else:
            response = error_response(
                app_settings,
                status_code=exc.status_code,
                error="http_error",
                message=str(exc.detail),
                plain_text=str(exc.detail),
            )
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(AlbumsAPIError)
    async def handle_albums_api_error(request: Request, exc: AlbumsAPIError):
        """Known application errors; full context is logged server-side only."""
        rid = request_id_var.get("")
        logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        plain_text = (
            app_settings.server_error_text if exc.status_code >= 500 else exc.message
        )
        return error_response(
            app_settings,
            status_code=exc.status_code,
            error=exc.error_code,
            message=exc.message,
            plain_text=plain_text,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[Catalog] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to use (defaults to the module singleton)
        catalog:  Albums to serve (defaults to default_catalog())

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app_settings = settings or default_settings
    app_catalog = catalog if catalog is not None else default_catalog()

    app = FastAPI(
        title=app_settings.app_name,
        description="Read-only catalog of albums served as JSON.",
        version=__version__,
        docs_url="/docs" if app_settings.enable_docs else None,
        redoc_url="/redoc" if app_settings.enable_docs else None,
        openapi_url="/openapi.json" if app_settings.enable_docs else None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.catalog = app_catalog

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute. Execution order:
    # RequestID → Logging → GZip → CORS → FaultIsolation → router
    app.add_middleware(FaultIsolationMiddleware, settings=app_settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=app_settings.gzip_minimum_size)

    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app, app_settings)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(albums.router)
    app.include_router(health.router)

    return app


# uvicorn expects `albums_api.main:app` to be importable
app = create_app()
