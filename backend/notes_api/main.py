"""
Notes API — FastAPI Application Factory
========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own settings and its own note store.
Who:   uvicorn (`uvicorn notes_api.main:app`), the `notes-api` script, tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────┐ ┌────────┐ ┌─────────┐ ┌─────────────┐    │
    │  │ CORS │→│ Req ID │→│ Logging │→│ Errors(500) │    │
    │  └──────┘ └────────┘ └─────────┘ └─────────────┘    │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │ /api/notes   │ │ /health  │ │ /               │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ Route→404   │   │
    │  └──────────────────────────────────────────────┘   │
    │                                                     │
    │  State: settings, note_store (seeded with 3 notes)  │
    │  Frontend: static files from `dist/` when built     │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from pathlib import Path
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.staticfiles import StaticFiles

from notes_api import __version__
from notes_api.config import Settings, settings as default_settings
from notes_api.exceptions import NotFoundError, ValidationError
from notes_api.middleware.errors import UnhandledErrorMiddleware
from notes_api.middleware.logging import RequestLoggingMiddleware
from notes_api.middleware.request_id import RequestIDMiddleware, request_id_var
from notes_api.routes import health, notes
from notes_api.routes.health import AVAILABLE_ENDPOINTS
from notes_api.store import InMemoryNoteStore, NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(app_settings: Settings) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, app_settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Set up logging and announce the listen address on startup."""
    app_settings: Settings = app.state.settings
    setup_logging(app_settings)

    base_url = f"http://{app_settings.host}:{app_settings.port}"
    logger.info("Notes API %s starting up", __version__)
    logger.info("Server running on port %d", app_settings.port)
    logger.info("Health: %s/health", base_url)
    logger.info("API: %s/api/notes", base_url)
    logger.info("Environment: %s", app_settings.environment)

    yield

    # Notes are held in memory only; they are dropped with the process
    remaining = await app.state.note_store.list_notes()
    logger.info("Notes API shutting down (%d notes discarded)", len(remaining))


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        RequestValidationError  → 400 Bad Request (malformed body)
        NotFoundError           → 404 Not Found
        HTTPException 404/405   → 404 Not Found with the endpoint list

    Every error body carries an `error` field and the request ID. Unexpected
    exceptions become 500s in UnhandledErrorMiddleware, inside the CORS and
    request ID layers, so those responses keep both headers.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """FastAPI could not parse the request body."""
        rid = request_id_var.get("")
        logger.warning("[%s] Invalid request: %s", rid, exc.errors())
        return JSONResponse(
            status_code=400,
            content={
                "error": "Invalid request",
                "details": {"errors": jsonable_encoder(exc.errors())},
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        logger.info("[%s] %s: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=404,
            content={
                "error": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """
        No route matched (404) or the path exists without this method (405).

        Both are reported as an unknown endpoint, listing what is available.
        """
        rid = request_id_var.get("")
        if exc.status_code in (404, 405):
            return JSONResponse(
                status_code=404,
                content={
                    "error": "Endpoint not found",
                    "availableEndpoints": AVAILABLE_ENDPOINTS,
                    "request_id": rid,
                },
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail), "request_id": rid},
            headers=getattr(exc, "headers", None),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[NoteStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use; defaults to the module-level singleton.
        store: Note store to serve; defaults to a fresh in-memory store
               holding the three seed notes.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="Notes API",
        description="Create, list, update and delete short text notes held in memory.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.note_store = store if store is not None else InMemoryNoteStore.with_seed_notes()

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition: CORS runs first,
    # UnhandledErrorMiddleware sits closest to the routes.
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    register_exception_handlers(app)

    app.include_router(notes.router)
    app.include_router(health.router)

    # ── Frontend ──────────────────────────────────────────────────────────
    # Mounted last so API routes win; a missing file raises HTTPException(404)
    # and falls through to the unknown-endpoint body.
    if app_settings.static_dir:
        static_path = Path(app_settings.static_dir)
        if static_path.is_dir():
            app.mount("/", StaticFiles(directory=static_path, html=True), name="frontend")
            logger.info("Serving frontend from %s", static_path.resolve())

    return app


def run() -> None:
    """Start uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(
        "notes_api.main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )


# uvicorn expects `notes_api.main:app` to be importable
app = create_app()
