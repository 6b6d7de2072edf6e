"""String Service API client.

A thin wrapper around the two routes of the String Service.  The
client uses the ``requests`` library and returns the same pydantic
models the server produces:

* :meth:`StringServiceClient.uppercase` – ``POST /uppercase``.
* :meth:`StringServiceClient.count` – ``POST /count``.

Business failures are part of the response (``UppercaseResponse.err``)
and do not raise.  Transport failures (connection errors, non‑2xx
status codes, undecodable bodies) raise :class:`StringServiceClientError`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from string_service.app.schemas.strings import (
    CountRequest,
    CountResponse,
    UppercaseRequest,
    UppercaseResponse,
)


logger = logging.getLogger(__name__)


class StringServiceClientError(Exception):
    """Raised when a call to the service fails below the business level.

    Attributes:
        status_code: HTTP status of the failed response, if one was received.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class StringServiceClient:
    """Client for the String Service HTTP API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3090``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _post(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending POST request to %s", url)
            response = self.session.post(url, json=body, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.error("API request failed (%s): %s", status, exc)
            raise StringServiceClientError(str(exc), status_code=status) from exc
        except (requests.RequestException, ValueError) as exc:
            logger.error("API request failed: %s", exc)
            raise StringServiceClientError(str(exc)) from exc

    def uppercase(self, s: str) -> UppercaseResponse:
        """Upper‑case ``s`` remotely."""
        data = self._post("/uppercase", UppercaseRequest(s=s).model_dump())
        try:
            return UppercaseResponse.model_validate(data)
        except ValidationError as exc:
            raise StringServiceClientError(f"unexpected response: {data!r}") from exc

    def count(self, s: str) -> CountResponse:
        """Count the characters of ``s`` remotely."""
        data = self._post("/count", CountRequest(s=s).model_dump())
        try:
            return CountResponse.model_validate(data)
        except ValidationError as exc:
            raise StringServiceClientError(f"unexpected response: {data!r}") from exc
