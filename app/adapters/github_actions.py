"""GitHub Actions runner integration for job outputs and failure reporting."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import TextIO
import uuid

from .interfaces import RunnerPort


class GitHubActionsRunner(RunnerPort):
    """Runner adapter speaking the GitHub Actions workflow command protocol.

    Outputs are appended to the file named by `GITHUB_OUTPUT` when available;
    otherwise they are emitted as `::set-output` workflow commands.
    """

    def __init__(self, output_path: str | None = None, stream: TextIO | None = None):
        """Initialize runner adapter.

        Args:
            output_path: Optional path of the runner output file.
            stream: Optional text stream for workflow commands (defaults to stdout).

        Returns:
            None: Initializer does not return a value.

        Raises:
            RuntimeError: This initializer does not raise runtime errors.
        """

        self._output_path = Path(output_path) if output_path else None
        self._stream = stream or sys.stdout
        self.failed_message: str | None = None

    def runner_set_output(self, name: str, value: str) -> None:
        """Publish one named output value for downstream steps.

        Multi-line values use the heredoc delimiter syntax of the output file.

        Args:
            name: Output name.
            value: Output value.

        Returns:
            None: Output is recorded as a side effect.

        Raises:
            ValueError: Raised when name is blank.
            OSError: Raised when the output file cannot be written.
        """

        normalized_name = name.strip()
        if not normalized_name:
            raise ValueError("name must not be blank")

        if self._output_path is None:
            self._stream.write(f"::set-output name={normalized_name}::{value}\n")
            return

        with self._output_path.open("a", encoding="utf-8") as output_file:
            if "\n" in value:
                delimiter = f"ghadelimiter_{uuid.uuid4()}"
                output_file.write(f"{normalized_name}<<{delimiter}\n{value}\n{delimiter}\n")
            else:
                output_file.write(f"{normalized_name}={value}\n")

    def runner_set_failed(self, message: str) -> None:
        """Emit an error annotation and remember the failure.

        Args:
            message: Failure description.

        Returns:
            None: Failure is recorded as a side effect.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        self.failed_message = f"Action failed: {message}"
        escaped_message = self.failed_message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        self._stream.write(f"::error::{escaped_message}\n")
