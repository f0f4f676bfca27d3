"""
Health check endpoints.

``/health`` answers as long as the process serves requests; ``/ready``
also reports which calculation service the application was wired with.
"""

from fastapi import APIRouter, Depends

from calculation_api.app.api.deps import get_calculation_service, get_settings
from calculation_api.app.core.config import Settings
from calculation_api.app.schemas.health import HealthRead, ReadinessRead
from calculation_api.app.services.calculation_service import CalculationService

router = APIRouter()


@router.get("/health", response_model=HealthRead)
async def health_check(app_settings: Settings = Depends(get_settings)) -> HealthRead:
    """Return OK and the API version."""
    return HealthRead(status="ok", version=app_settings.api_version)


@router.get("/ready", response_model=ReadinessRead)
async def readiness_check(
    service: CalculationService = Depends(get_calculation_service),
) -> ReadinessRead:
    """Return ready together with the bound service implementation."""
    return ReadinessRead(status="ready", service=type(service).__name__)
