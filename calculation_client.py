"""Calculation API client.

This module defines a small client wrapper around the Calculation API
HTTP surface.  It uses the ``requests`` library internally and exposes
high-level methods for the available operations:

* :meth:`CalculationAPI.add_two_to` – ask the server to add two to a value.
* :meth:`CalculationAPI.health` – query the liveness probe.

High-level methods never raise for HTTP or transport errors.  They
return a tuple ``(data, error)``: on success ``error`` is ``None``; on
failure ``data`` is ``None`` and ``error`` is a dictionary with the
keys ``status_code`` and ``message``.  For the calculation endpoint a
``401`` means the server's calculation service is unavailable and a
``500`` means it failed; ``message`` carries the server's plain-text
notice in both cases.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15


class CalculationAPI:
    """Client for interacting with the Calculation API."""

    ADD_TWO_PATH = "/calculate/addTwoTo/{value}"
    HEALTH_PATH = "/health"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` for every current endpoint).
            path: Path relative to :attr:`base_url`.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message`` describing the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            # also covers a 2xx body that is not JSON (requests.JSONDecodeError)
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Calculation operations
    # ------------------------------------------------------------------
    def add_two_to(self, value: int) -> Tuple[Optional[int], Optional[Dict[str, Any]]]:
        """Ask the server to add two to ``value``.

        Args:
            value: The integer operand.
        Returns:
            A tuple ``(result, error)``.
        """
        data, error = self._request("GET", self.ADD_TWO_PATH.format(value=int(value)))
        if error:
            return None, error
        if not isinstance(data, int) or isinstance(data, bool):
            logger.warning("Unexpected calculation response: %r", data)
            return None, {"status_code": None, "message": f"Unexpected response body: {data!r}"}
        return data, None

    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Query the liveness probe.

        Returns:
            A tuple ``(payload, error)`` where ``payload`` contains the
            ``status`` and ``version`` keys on success.
        """
        return self._request("GET", self.HEALTH_PATH)
