"""Project-native typed exceptions for status endpoint fetch failures."""

from __future__ import annotations


class StatusApiError(Exception):
    """Base exception for adapter-level status endpoint failures.

    Attributes:
        status_code: Optional upstream HTTP status code.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class StatusApiConnectionError(StatusApiError, ConnectionError):
    """Transport-level connectivity failure while reaching the status endpoint."""


class StatusApiTimeoutError(StatusApiError, TimeoutError):
    """Transport timeout while waiting for the status endpoint."""


class StatusApiHttpError(StatusApiError):
    """Non-success HTTP status returned by the status endpoint."""


class StatusApiResponseError(StatusApiError, ValueError):
    """Response body could not be decoded as a JSON object."""
