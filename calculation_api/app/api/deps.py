"""
Dependency providers for the API routes.

``create_app`` binds the calculation service and the settings on
``app.state``; the functions below hand them to route handlers via
``Depends``.  Tests build their own application with a service double
instead of patching these providers.
"""

from fastapi import HTTPException, Request, status

from calculation_api.app.core.config import Settings
from calculation_api.app.services.calculation_service import CalculationService

JSON_MEDIA_TYPE = "application/json"


def get_calculation_service(request: Request) -> CalculationService:
    """Return the calculation service bound to the running application."""
    return request.app.state.calculation_service


def get_settings(request: Request) -> Settings:
    """Return the settings the running application was created with."""
    return request.app.state.settings


def require_json_content(request: Request) -> None:
    """Reject requests that declare a non-JSON body.

    The calculation routes accept JSON only.  Requests without a
    ``Content-Type`` header (the usual GET) pass; any other declared
    media type gets ``415``.
    """
    content_type = request.headers.get("content-type")
    if not content_type:
        return
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"Unsupported media type {media_type!r}; expected {JSON_MEDIA_TYPE}",
        )
