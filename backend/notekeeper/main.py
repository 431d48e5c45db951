"""
NoteKeeper Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       bound to its own MemoryStore.
Who:   Called by uvicorn (uvicorn notekeeper.main:app), by __main__.py, and
       by the test suite (one fresh app and store per test).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐                   │
    │  │ Req ID   │→│  Logging        │                   │
    │  └──────────┘ └─────────────────┘                   │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌─────────────┐ ┌─────────────┐   │
    │  │ POST /signup │ │ GET/POST/   │ │ GET /health │   │
    │  │ POST /login  │ │ DELETE notes│ │             │   │
    │  └──────────────┘ └─────────────┘ └─────────────┘   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ BadRequest→400 │ Unauthorized→401 │ else→500 │   │
    │  └──────────────────────────────────────────────┘   │
    │                                                     │
    │  app.state.store: MemoryStore                       │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from notekeeper import __version__
from notekeeper.config import settings
from notekeeper.exceptions import BadRequestError, NoteKeeperError, UnauthorizedError
from notekeeper.middleware.logging import RequestLoggingMiddleware
from notekeeper.middleware.request_id import RequestIDMiddleware, request_id_var
from notekeeper.routes import accounts, health, notes
from notekeeper.services.store import MemoryStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Set up logging on startup; report what is discarded on shutdown."""
    setup_logging()
    logger.info("NoteKeeper %s starting on %s:%d", __version__, settings.backend_host, settings.backend_port)

    yield

    # Nothing is persisted: everything in the store is lost here.
    counts = app.state.store.stats()
    logger.info(
        "NoteKeeper shutting down; discarding %d users, %d notes, %d sessions",
        counts["users"],
        counts["notes"],
        counts["sessions"],
    )


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(exc: NoteKeeperError, message: Optional[str] = None) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.error_code,
            "message": message or exc.message,
            "request_id": request_id_var.get(""),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        BadRequestError     → 400 Bad Request
        UnauthorizedError   → 401 Unauthorized
        NoteKeeperError     → 500 Internal Server Error (catch-all for custom)
        Exception           → 500 Internal Server Error (unexpected errors)

    `context` is logged, never returned: it can hold session ids.
    """

    @app.exception_handler(BadRequestError)
    async def handle_bad_request(request: Request, exc: BadRequestError):
        logger.info("[%s] Bad request: %s", request_id_var.get(""), exc.message)
        return _error_response(exc)

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(request: Request, exc: UnauthorizedError):
        logger.info("[%s] Unauthorized %s %s", request_id_var.get(""), request.method, request.url.path)
        return _error_response(exc)

    @app.exception_handler(NoteKeeperError)
    async def handle_app_error(request: Request, exc: NoteKeeperError):
        logger.error("[%s] Application error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error_response(exc, message="An internal error occurred. Please try again later.")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[MemoryStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: State for this app instance. A new empty MemoryStore is
               created when omitted, so separate apps never share data.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="NoteKeeper API",
        description="Multi-user note taking: sign up, log in, manage personal notes.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else MemoryStore()

    # Last added = first to execute: RequestID → Logging → routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(accounts.router)
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


app = create_app()
