"""
Main entrypoint for the Guest List API.

This module assembles the FastAPI application: it sets up logging,
installs the CORS middleware and the domain error handlers, includes
the routers and attaches a fresh ``EventStore``.  ``create_app`` builds
and configures the app, which is then instantiated at module import
time as ``app`` so it can be served directly, e.g.::

    uvicorn guest_list_api.app.main:app --port 5000
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import NotFoundError, ValidationError
from .core.logging_config import setup_logging
from .schemas.error import ErrorResponse
from .services.event_store import EventStore


logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = "Origin, X-Requested-With, Content-Type, Accept"
CORS_ALLOW_METHODS = "GET, POST, PATCH, DELETE, OPTIONS"


def error_response(status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse.from_message(message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app(store: Optional[EventStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[EventStore]
        Store serving the requests.  A new, empty store is created when
        omitted, so every app starts without events or guests.
    settings : Optional[Settings]
        Overrides the module level settings read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store if store is not None else EventStore()
    app.state.settings = settings

    cors_headers = {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
        "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
    }

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        # Preflight requests never reach the routers.
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)
        response.headers.update(cors_headers)
        return response

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return error_response(400, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.info("%s %s: %s", request.method, request.url.path, exc.message)
        return error_response(404, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_bad_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Malformed request body on %s: %s", request.url.path, exc.errors())
        return error_response(400, "Request body must be a JSON object")

    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info("Guest list server started on http://localhost:%s", settings.port)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
