"""
Calculation endpoints.

``GET /calculate/addTwoTo/{value}`` asks the injected
``CalculationService`` to add two to ``value`` and maps the outcome to
a response:

* success -> ``200`` with the integer as the JSON body;
* service reports itself unavailable -> ``401`` with a plain-text notice;
* service failed -> ``500`` with a plain-text notice.

Failure details are logged but never returned to the caller.  Parsing
``value`` as an integer is left to FastAPI, which answers ``422`` for
anything else before the handler runs.  Requests declaring a non-JSON
``Content-Type`` are refused with ``415``.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from calculation_api.app.api.deps import JSON_MEDIA_TYPE, get_calculation_service, require_json_content
from calculation_api.app.services.calculation_service import (
    CalculationService,
    CalculationStatus,
    evaluate,
)

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "CalculationService is down, try again later."
FAILURE_MESSAGE = "CalculationService failed, please let support know."

# JSON in, JSON out; the error notices are plain text.
router = APIRouter(
    default_response_class=JSONResponse,
    dependencies=[Depends(require_json_content)],
)


@router.get(
    "/addTwoTo/{value}",
    response_model=int,
    responses={
        status.HTTP_401_UNAUTHORIZED: {
            "description": "Calculation service unavailable",
            "content": {"text/plain": {"example": UNAVAILABLE_MESSAGE}},
        },
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "description": "Calculation service failed",
            "content": {"text/plain": {"example": FAILURE_MESSAGE}},
        },
    },
    openapi_extra={"x-consumes": [JSON_MEDIA_TYPE], "x-produces": [JSON_MEDIA_TYPE]},
)
async def add_two_to(
    value: int,
    service: CalculationService = Depends(get_calculation_service),
) -> Response:
    """Return ``value + 2`` as computed by the bound service."""
    result = evaluate(service, value)

    if result.status is CalculationStatus.OK:
        return JSONResponse(content=result.value, status_code=status.HTTP_200_OK)

    if result.status is CalculationStatus.UNAVAILABLE:
        logger.warning(
            "Calculation service unavailable for value=%s (reported %s)", value, result.value
        )
        return PlainTextResponse(UNAVAILABLE_MESSAGE, status_code=status.HTTP_401_UNAUTHORIZED)

    logger.error("Calculation failed for value=%s: %s", value, result.error)
    return PlainTextResponse(FAILURE_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
