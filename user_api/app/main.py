"""
Main entrypoint for the User API.

This module assembles the FastAPI application: it sets up logging,
wires the database, repository and service together, registers error
handlers and includes the versioned routers.  ``create_app`` builds
the app, which is then instantiated at module import time as ``app``
so that it can be served directly, e.g.::

    uvicorn user_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, get_database_url, settings as default_settings
from .core.db import Database, init_db
from .core.errors import ConstraintViolation, StorageUnavailable
from .core.logging_config import setup_logging
from .repositories.user_repository import UserRepository
from .services.user_service import UserService

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Map request and storage errors to HTTP responses."""

    @app.exception_handler(RequestValidationError)
    async def bad_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Bad request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Malformed request body"},
        )

    @app.exception_handler(ConstraintViolation)
    async def constraint_violation_handler(request: Request, exc: ConstraintViolation) -> JSONResponse:
        logger.error("Constraint violation on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})

    @app.exception_handler(StorageUnavailable)
    async def storage_unavailable_handler(request: Request, exc: StorageUnavailable) -> JSONResponse:
        logger.error("Storage unavailable on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Storage unavailable"},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured application.  Its ``state`` carries the
        ``database`` and ``user_service`` instances.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the wiring below
    # can log.
    setup_logging(settings.log_level, settings.log_file or None)

    database = Database(
        get_database_url(settings),
        echo=settings.database_echo,
        pool_pre_ping=settings.database_pool_pre_ping,
    )
    user_service = UserService(UserRepository(database))

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Create tables before serving; release the pool on shutdown.
        init_db(database)
        yield
        database.dispose()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.user_service = user_service

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that uvicorn can
# discover it without calling create_app manually.
app = create_app()
