"""
Main entrypoint for the Social Media API.

This module assembles the FastAPI application, sets up logging and
includes the routers.  ``create_app`` builds and configures the app,
which is then instantiated at module import time as ``app``::

    uvicorn social_media_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError

from .api.router import router
from .core.config import settings
from .core.db import DataAccessError, init_db
from .core.logging_config import request_logging_middleware, setup_logging


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, registers the routers, the request logging
    middleware and the exception handlers, and creates the database
    schema on startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.middleware("http")(request_logging_middleware)
    app.include_router(router)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
        # Unparseable bodies and non-integer ids get the same answer as
        # any other rejected input: 400 with no body.
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(DataAccessError)
    async def data_access_exception_handler(request: Request, exc: DataAccessError) -> Response:
        logger.error("Data access failure on %s %s: %s", request.method, request.url.path, exc)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.on_event("startup")
    async def startup_event() -> None:
        init_db()

    return app


app = create_app()
