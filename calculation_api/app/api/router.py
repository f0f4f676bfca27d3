"""
Top-level API router.

Aggregates the domain routers under their public prefixes.  When a
new domain is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import calculation, health

router = APIRouter()

router.include_router(calculation.router, prefix="/calculate", tags=["calculate"])
router.include_router(health.router, tags=["health"])
