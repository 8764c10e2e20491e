"""
Main entrypoint for the Project and Report API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory services and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn project_report_api.app.main:app --reload

Interactive API documentation is served by FastAPI at ``/docs``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from .api.responses import INTERNAL_ERROR_MESSAGE, validation_failure
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import RequestLoggingMiddleware, setup_logging
from .services import Services, build_services

logger = logging.getLogger(__name__)

DESCRIPTION = (
    "API for managing projects and reports.\n\n"
    "Every endpoint under `/api/v1` requires `Authorization: Bearer <API_TOKEN>`; "
    "use the **Authorize** button with the configured token."
)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer request bodies rejected by the schemas with 400 and a reason list."""
    error = validation_failure(exc.errors())
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected exceptions and hide their details from clients."""
    logger.error(
        "Unhandled exception on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_MESSAGE},
    )


def create_app(services: Optional[Services] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call gets its own services (and therefore its own empty
    store) unless ``services`` is supplied.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=DESCRIPTION,
        debug=settings.debug,
    )
    app.state.services = services or build_services()

    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def health() -> str:
        return "Api Healthy"

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
