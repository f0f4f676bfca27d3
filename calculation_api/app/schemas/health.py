"""
Pydantic schemas for the health and readiness probes.
"""

from pydantic import BaseModel, Field


class HealthRead(BaseModel):
    """Body returned by ``GET /health``."""

    status: str = Field(..., description="Always ``ok`` while the process serves requests")
    version: str = Field(..., description="API version from the application settings")


class ReadinessRead(BaseModel):
    """Body returned by ``GET /ready``."""

    status: str = Field(..., description="Always ``ready`` once a calculation service is bound")
    service: str = Field(..., description="Class name of the bound calculation service")
