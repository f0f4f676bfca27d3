"""
Main entrypoint for the Calculation API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app around an explicitly supplied
``CalculationService``; the module-level ``app`` is built with the
default in-process service so that ASGI servers can import it::

    uvicorn calculation_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .services.calculation_service import CalculationService, DefaultCalculationService

logger = logging.getLogger(__name__)


def create_app(
    calculation_service: Optional[CalculationService] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    calculation_service : Optional[CalculationService]
        Service handed to the calculation endpoint on every request.
        Defaults to a new ``DefaultCalculationService``.
    app_settings : Optional[Settings]
        Settings to configure the app with.  Defaults to the module
        level ``settings`` read from the environment at import time.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    if calculation_service is None:
        calculation_service = DefaultCalculationService()

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
    )
    app.state.calculation_service = calculation_service
    app.state.settings = app_settings

    app.include_router(api_router)

    logger.info(
        "%s %s configured with %s",
        app_settings.project_name,
        app_settings.api_version,
        type(calculation_service).__name__,
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
