"""
Service layer for the calculation endpoint.

``CalculationService`` is the capability the HTTP handler depends on.
The handler never calls an implementation directly: it goes through
:func:`evaluate`, which turns whatever the implementation does (return
a result, return a bare integer, raise) into a ``CalculationResult``.
That keeps the response mapping in the endpoint free of ``try``
blocks and lets tests swap in a double without touching the handler.

Two outcomes besides success are distinguished:

* ``UNAVAILABLE`` -- the service answered but reports itself degraded.
  Older implementations signal this by returning a negative integer;
  :meth:`CalculationResult.from_legacy` keeps that convention for bare
  integer results only.
* ``FAILED`` -- the service raised or returned something unusable.
"""

from __future__ import annotations

import abc
import enum
import logging
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Constant added by ``add_two_to``.
ADD_TWO_OFFSET = 2


class CalculationStatus(str, enum.Enum):
    """Outcome of a single service call."""

    OK = "ok"
    UNAVAILABLE = "unavailable"
    FAILED = "failed"


@dataclass(frozen=True)
class CalculationResult:
    """Explicit result of a calculation.

    ``value`` carries the computed integer for ``OK`` and, optionally,
    the degraded value reported with ``UNAVAILABLE``.  ``error`` holds
    a diagnostic for ``FAILED``; it is meant for logs, not for HTTP
    clients.
    """

    status: CalculationStatus
    value: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: int) -> "CalculationResult":
        return cls(status=CalculationStatus.OK, value=value)

    @classmethod
    def unavailable(cls, value: Optional[int] = None) -> "CalculationResult":
        return cls(status=CalculationStatus.UNAVAILABLE, value=value)

    @classmethod
    def failed(cls, error: str) -> "CalculationResult":
        return cls(status=CalculationStatus.FAILED, error=error)

    @classmethod
    def from_legacy(cls, value: int) -> "CalculationResult":
        """Classify a bare integer using the negative-means-down convention.

        A negative value is read as the unavailable signal, anything
        else (zero included) as a computed value.  A genuine negative
        result cannot be told apart from the signal here, which is why
        services should return ``CalculationResult`` instead.
        """
        if value < 0:
            return cls.unavailable(value)
        return cls.ok(value)

    @property
    def succeeded(self) -> bool:
        return self.status is CalculationStatus.OK


class CalculationService(abc.ABC):
    """Capability used by the calculation endpoint."""

    @abc.abstractmethod
    def add_two_to(self, value: int) -> CalculationResult:
        """Add two to ``value``.

        Implementations may raise to signal failure; callers should go
        through :func:`evaluate` rather than handle that themselves.
        """


class DefaultCalculationService(CalculationService):
    """In-process implementation bound by the application by default."""

    def add_two_to(self, value: int) -> CalculationResult:
        return CalculationResult.ok(value + ADD_TWO_OFFSET)


def _is_plain_int(value: Any) -> bool:
    # bool is an int subclass but never a meaningful result
    return isinstance(value, int) and not isinstance(value, bool)


def evaluate(service: CalculationService, value: int) -> CalculationResult:
    """Call ``service.add_two_to(value)`` and normalise the outcome.

    Parameters
    ----------
    service : CalculationService
        The implementation to call.
    value : int
        The operand taken from the request path.

    Returns
    -------
    CalculationResult
        The service's own result or a classified bare integer.  A call
        that raised or returned something unusable (including ``OK``
        without an integer value) becomes ``FAILED``.  Exceptions never
        propagate out of this function.
    """
    try:
        raw: Any = service.add_two_to(value)
    except Exception as exc:
        logger.exception("%s.add_two_to(%s) raised", type(service).__name__, value)
        return CalculationResult.failed(str(exc) or type(exc).__name__)

    if isinstance(raw, CalculationResult):
        if raw.succeeded and not _is_plain_int(raw.value):
            logger.error(
                "%s.add_two_to(%s) returned OK without an integer value: %r",
                type(service).__name__,
                value,
                raw.value,
            )
            return CalculationResult.failed("OK result without integer value")
        return raw
    if _is_plain_int(raw):
        return CalculationResult.from_legacy(raw)

    logger.error(
        "%s.add_two_to(%s) returned unsupported type %s",
        type(service).__name__,
        value,
        type(raw).__name__,
    )
    return CalculationResult.failed(f"Unsupported result type: {type(raw).__name__}")
