"""
Main entrypoint for the Record Store API.

This module assembles the FastAPI application: it sets up logging,
creates the one store instance the process owns, mounts the routes for
the configured profile and registers the exception handlers that turn
every failure into an ``{"error": ...}`` body.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn record_store_api.app.main:app --port 3000
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import build_router
from .core.config import Settings, settings as default_settings
from .core.errors import RecordStoreError
from .core.ids import make_id_factory
from .core.logging_config import setup_logging
from .core.responses import RecordJSONResponse
from .services.profiles import get_profile
from .services.record_store import RecordStore

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "route not found"
INTERNAL_ERROR = "internal server error"


def build_store(config: Settings) -> RecordStore:
    """Create the store described by ``config``, seeded with demo data if enabled."""
    profile = get_profile(config.record_type)
    seed = profile.demo_records if config.seed_demo_data else ()
    return RecordStore(profile, id_factory=make_id_factory(config.id_length), records=seed)


def _error(status_code: int, message: str) -> RecordJSONResponse:
    return RecordJSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Map store errors, routing errors and unexpected failures to JSON bodies."""

    @app.exception_handler(RecordStoreError)
    async def store_error_handler(request: Request, exc: RecordStoreError) -> RecordJSONResponse:
        if exc.status_code >= 500:
            logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc.message)
            return _error(exc.status_code, INTERNAL_ERROR)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> RecordJSONResponse:
        # Unknown paths and known paths with an unsupported method are both
        # reported as a missing route.
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return _error(status.HTTP_404_NOT_FOUND, ROUTE_NOT_FOUND)
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> RecordJSONResponse:
        logger.info("Rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
        return _error(status.HTTP_400_BAD_REQUEST, "request body must be a JSON object")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> RecordJSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


def create_app(settings: Optional[Settings] = None, store: Optional[RecordStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment‑derived
        ``core.config.settings``.
    store : Optional[RecordStore]
        Store to serve.  When omitted one is built from ``settings``.
        Passing a store lets tests control ids and contents.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(config.log_level, config.log_file or None)

    if store is None:
        store = build_store(config)
    profile = store.profile

    app = FastAPI(
        title=config.project_name,
        version=config.api_version,
        debug=config.debug,
        default_response_class=RecordJSONResponse,
        docs_url="/api-docs",
    )
    app.state.settings = config
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def strip_trailing_slash(request: Request, call_next):
        # ``/api/products/`` is served by the ``/api/products`` route
        # directly instead of answering with a redirect.
        path = request.scope["path"]
        if len(path) > 1 and path.endswith("/"):
            request.scope["path"] = path.rstrip("/") or "/"
        return await call_next(request)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    register_exception_handlers(app)
    app.include_router(build_router(profile))

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info(
            "%s %s serving %d %s at /api/%s",
            config.project_name,
            config.api_version,
            len(store),
            profile.collection,
            profile.collection,
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
