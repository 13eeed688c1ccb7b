"""Typed domain models shared across runtime layers.

This module provides simple data contracts for the status payloads served by
the status server and consumed by the README sync job.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import time
from typing import Any, Callable, Final

APPLICATION_VERSION: Final[str] = "1.0.0"


@dataclass(frozen=True)
class StatusPayload:
    """Status response contract shared by the server and the sync job.

    Attributes:
        status: Overall status text.
        service: Service identifier.
        timestamp: ISO-8601 instant at which the payload was produced.
        uptime: Optional whole seconds since the producing process started.
    """

    status: str
    service: str
    timestamp: str
    uptime: int | None = None

    def payload_to_dict(self) -> dict[str, Any]:
        """Return JSON-ready mapping, omitting `uptime` when absent.

        Returns:
            dict[str, Any]: Serializable status payload.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        payload: dict[str, Any] = {
            "status": self.status,
            "service": self.service,
            "timestamp": self.timestamp,
        }
        if self.uptime is not None:
            payload["uptime"] = self.uptime
        return payload


@dataclass(frozen=True)
class HealthPayload:
    """Health response contract used by liveness checks.

    Attributes:
        healthy: Whether the process is able to answer requests.
    """

    healthy: bool = True


@dataclass(frozen=True)
class InfoPayload:
    """Index response contract listing the server surface.

    Attributes:
        name: Service identifier.
        version: Release version.
        endpoints: Mapping from route name to path.
    """

    name: str
    version: str
    endpoints: dict[str, str]


def domain_format_timestamp(moment: datetime) -> str:
    """Render an aware datetime as UTC ISO-8601 with millisecond precision.

    Args:
        moment: Timezone-aware datetime.

    Returns:
        str: Timestamp such as `2024-01-01T12:00:00.000Z`.

    Raises:
        ValueError: Raised when the datetime is naive.
    """

    if moment.tzinfo is None:
        raise ValueError("moment must be timezone-aware")
    utc_moment = moment.astimezone(timezone.utc)
    return utc_moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ServerRuntime:
    """Process-lifetime state captured once at server startup.

    The wall clock stamps reported timestamps. Uptime is measured on the
    monotonic clock.
    """

    def __init__(
        self,
        wall_clock: Callable[[], datetime] | None = None,
        monotonic_clock: Callable[[], float] | None = None,
    ):
        """Capture the start instant of the serving process.

        Args:
            wall_clock: Optional provider of the current aware datetime.
            monotonic_clock: Optional provider of monotonic seconds.

        Returns:
            None: Initializer does not return a value.

        Raises:
            RuntimeError: This initializer does not raise runtime errors.
        """

        self._wall_clock = wall_clock or (lambda: datetime.now(timezone.utc))
        self._monotonic_clock = monotonic_clock or time.monotonic
        started_at = self._wall_clock()
        # reported timestamps carry milliseconds, so the start instant does too
        self.started_at_utc = started_at.replace(microsecond=started_at.microsecond // 1000 * 1000)
        self._started_monotonic = self._monotonic_clock()

    def runtime_now_utc(self) -> datetime:
        """Return the current wall-clock instant."""

        return self._wall_clock()

    def runtime_uptime_seconds(self) -> int:
        """Return whole seconds elapsed since startup, never negative."""

        elapsed_seconds = self._monotonic_clock() - self._started_monotonic
        return max(0, int(elapsed_seconds))

    def runtime_build_status(self, service_name: str) -> StatusPayload:
        """Build a fresh status payload for the current instant.

        Args:
            service_name: Service identifier to report.

        Returns:
            StatusPayload: `ok` status stamped with current time and uptime.

        Raises:
            ValueError: Raised when the wall clock returns a naive datetime.
        """

        return StatusPayload(
            status="ok",
            service=service_name,
            timestamp=domain_format_timestamp(self.runtime_now_utc()),
            uptime=self.runtime_uptime_seconds(),
        )
