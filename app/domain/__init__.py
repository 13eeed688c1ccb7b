"""Domain models used across application layer boundaries."""

from .models import (
    APPLICATION_VERSION,
    HealthPayload,
    InfoPayload,
    ServerRuntime,
    StatusPayload,
    domain_format_timestamp,
)
from .status_payload import REQUIRED_STATUS_FIELDS, StatusPayloadError, domain_parse_status_payload

__all__ = [
    "APPLICATION_VERSION",
    "HealthPayload",
    "InfoPayload",
    "REQUIRED_STATUS_FIELDS",
    "ServerRuntime",
    "StatusPayload",
    "StatusPayloadError",
    "domain_format_timestamp",
    "domain_parse_status_payload",
]
