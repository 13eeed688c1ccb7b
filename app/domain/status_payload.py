"""Validation of status payloads received from a remote status endpoint."""

from __future__ import annotations

from typing import Any, Final

from .models import StatusPayload

REQUIRED_STATUS_FIELDS: Final[tuple[str, ...]] = ("status", "service", "timestamp")


class StatusPayloadError(ValueError):
    """Raised when a status payload lacks required fields.

    Attributes:
        missing_fields: Required field names that were absent or empty.
    """

    def __init__(self, message: str, missing_fields: tuple[str, ...] = ()):
        super().__init__(message)
        self.missing_fields = missing_fields


def domain_parse_status_payload(data: Any) -> StatusPayload:
    """Validate a decoded JSON document and build a status payload.

    Required fields must be present and truthy. `uptime` is carried over when
    the key is present with a non-null value.

    Args:
        data: Decoded JSON document.

    Returns:
        StatusPayload: Validated payload with string field values.

    Raises:
        StatusPayloadError: Raised when the document is not an object or
            required fields are missing.
    """

    if not isinstance(data, dict):
        raise StatusPayloadError("Invalid API response format. Expected a JSON object.")

    missing_fields = tuple(field_name for field_name in REQUIRED_STATUS_FIELDS if not data.get(field_name))
    if missing_fields:
        raise StatusPayloadError(
            "Invalid API response format. Expected status, service, and timestamp fields. "
            f"Missing: {', '.join(missing_fields)}",
            missing_fields=missing_fields,
        )

    uptime_value = data.get("uptime")
    return StatusPayload(
        status=str(data["status"]),
        service=str(data["service"]),
        timestamp=str(data["timestamp"]),
        uptime=uptime_value,
    )
