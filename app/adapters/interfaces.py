"""Typed interfaces for adapter-layer responsibilities."""

from typing import Any
from typing import Protocol


class StatusApiPort(Protocol):
    """Port definition for fetching a status document from a remote endpoint."""

    def adapter_fetch_status(self, url: str) -> dict[str, Any]:
        """Fetch one status document from the given endpoint.

        Args:
            url: Absolute endpoint URL.

        Returns:
            dict[str, Any]: Decoded JSON object.

        Raises:
            ConnectionError: Raised when upstream connection fails.
            TimeoutError: Raised when request exceeds timeout.
        """


class RunnerPort(Protocol):
    """Port definition for reporting results to the CI runner hosting the job."""

    def runner_set_output(self, name: str, value: str) -> None:
        """Publish one named output value for downstream steps.

        Args:
            name: Output name.
            value: Output value.

        Returns:
            None: Output is recorded as a side effect.

        Raises:
            OSError: Raised when the runner output file cannot be written.
        """

    def runner_set_failed(self, message: str) -> None:
        """Report the run as failed with a human-readable message.

        Args:
            message: Failure description.

        Returns:
            None: Failure is recorded as a side effect.

        Raises:
            RuntimeError: Raised when failure cannot be reported.
        """
