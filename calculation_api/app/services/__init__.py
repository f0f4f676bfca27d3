"""
Service layer abstraction.

Services encapsulate the business logic behind the HTTP handlers.  The
handlers receive a service instance through dependency injection, so
a different implementation (or a test double) can be bound without
changing any endpoint code.
"""

from .calculation_service import (  # noqa: F401
    ADD_TWO_OFFSET,
    CalculationResult,
    CalculationService,
    CalculationStatus,
    DefaultCalculationService,
    evaluate,
)
