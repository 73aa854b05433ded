"""
Main entrypoint for the Pet Care API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn petcare_api.app.main:app --reload

The entity collections are opened when the application starts, not
at import time, so importing this module never touches the database.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import get_database_path
from .core.errors import InvalidPayload, PetCareError
from .core.logging_config import setup_logging
from .repositories import Repositories

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    db_path = get_database_path(app.state.settings.database_url)
    app.state.repositories = Repositories.open(db_path)
    logger.info("%s %s ready (database: %s)", app.title, app.version, db_path)
    yield


async def handle_petcare_error(request: Request, exc: PetCareError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as ``InvalidPayload``.

    Only the first problem is reported, mirroring the service layer
    which stops at the first failing check.
    """
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        reason = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        reason = "Invalid request body"
    logger.warning("Rejected request to %s: %s", request.url.path, reason)
    error = InvalidPayload(reason)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the environment-derived defaults.
        Tests pass a ``Settings`` pointing at a temporary database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that startup can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_exception_handler(PetCareError, handle_petcare_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
