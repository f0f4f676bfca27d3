"""
Pydantic schema definitions for API payloads.

The calculation endpoint itself returns a bare JSON integer, so only
the probe endpoints need response models.
"""

from .health import HealthRead, ReadinessRead  # noqa: F401
