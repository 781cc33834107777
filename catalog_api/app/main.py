"""
Main entrypoint for the Catalog API.

This module assembles the FastAPI application, sets up logging,
registers exception handlers and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``::

    uvicorn catalog_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.db import get_database_path, init_db
from .core.exceptions import error_details
from .api.v1.router import router as v1_router


logger = logging.getLogger(__name__)


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed request bodies with 400 instead of FastAPI's 422.

    Business rule failures raised by the service are already 400, so
    clients see one status code for every rejected payload.
    """
    logger.info("Rejected request to %s: %s", request.url.path, error_details(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(error_details(exc.errors()))},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to build the app with.  Defaults to the module level
        ``settings`` read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.database_path = get_database_path(settings.database_url)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and applies migrations.
        init_db(app.state.database_path)
        logger.info("Database ready at %s", app.state.database_path)

    return app


app = create_app()
