"""HTTP adapter for fetching status documents from a remote endpoint."""

from __future__ import annotations

import json
import logging
from typing import Any, Final

import httpx

from .interfaces import StatusApiPort
from .status_api_errors import (
    StatusApiConnectionError,
    StatusApiHttpError,
    StatusApiResponseError,
    StatusApiTimeoutError,
)

logger = logging.getLogger(__name__)


class StatusApiAdapter(StatusApiPort):
    """Adapter issuing a single GET per fetch against a status endpoint.

    Failures are surfaced as typed exceptions and never retried.
    """

    _USER_AGENT: Final[str] = "status-readme-sync/1.0 (Python/httpx)"

    def __init__(self, request_timeout_seconds: float = 30.0):
        """Initialize status endpoint adapter.

        Args:
            request_timeout_seconds: HTTP request timeout in seconds.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when the timeout is not positive.
        """

        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")
        self._request_timeout_seconds = request_timeout_seconds

    def adapter_fetch_status(self, url: str) -> dict[str, Any]:
        """Fetch and decode the status document at `url`.

        Args:
            url: Absolute endpoint URL.

        Returns:
            dict[str, Any]: Decoded JSON object.

        Raises:
            ValueError: Raised when url is blank.
            StatusApiConnectionError: Raised for transport failures and malformed URLs.
            StatusApiTimeoutError: Raised when the request times out.
            StatusApiHttpError: Raised for non-2xx responses.
            StatusApiResponseError: Raised when the body is not a JSON object.
        """

        normalized_url = url.strip()
        if not normalized_url:
            raise ValueError("url must not be blank")

        logger.info("Calling API: %s", normalized_url)
        try:
            with httpx.Client(
                timeout=self._request_timeout_seconds,
                headers={"User-Agent": self._USER_AGENT, "Accept": "application/json"},
            ) as client:
                response = client.get(normalized_url)
        except httpx.TimeoutException as error:
            raise StatusApiTimeoutError(f"API request timed out: {error}") from error
        except httpx.HTTPError as error:
            raise StatusApiConnectionError(f"API request failed: {error}") from error
        except httpx.InvalidURL as error:
            raise StatusApiConnectionError(f"API request failed: invalid URL: {error}") from error

        if not response.is_success:
            raise StatusApiHttpError(
                f"API request failed with status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as error:
            raise StatusApiResponseError(
                f"API response is not valid JSON: {error}",
                status_code=response.status_code,
            ) from error

        if not isinstance(data, dict):
            raise StatusApiResponseError(
                "API response must be a JSON object",
                status_code=response.status_code,
            )

        logger.info("API Response: %s", json.dumps(data, indent=2))
        return data
