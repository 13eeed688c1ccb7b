"""Typed interfaces for job-layer orchestration responsibilities."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class ReadmeSyncResult:
    """Outcome of one successful README sync.

    Attributes:
        status: Validated `status` value from the fetched payload.
        service: Validated `service` value from the fetched payload.
        timestamp: Validated `timestamp` value from the fetched payload.
        readme_path: README file that was rewritten.
    """

    status: str
    service: str
    timestamp: str
    readme_path: Path


@dataclass(frozen=True)
class JobExecutionResult:
    """Result contract for one-shot workflow execution.

    Attributes:
        job_name: Job identifier.
        status: Final execution state (`success` or `failed`).
        error_message: Failure description when status is `failed`.
        sync_result: Sync outcome when status is `success`.
    """

    job_name: str
    status: str
    error_message: str | None = None
    sync_result: ReadmeSyncResult | None = None


class JobOrchestratorPort(Protocol):
    """Port definition for orchestrating one-shot jobs."""

    def job_supported_names(self) -> tuple[str, ...]:
        """Return the set of workflow names this orchestrator can execute.

        Returns:
            tuple[str, ...]: Deterministic list of supported job names.

        Raises:
            RuntimeError: Raised when supported job metadata is unavailable.
        """

    def job_execute(self, job_name: str) -> JobExecutionResult:
        """Execute one named workflow in the job layer.

        Args:
            job_name: Workflow name.

        Returns:
            JobExecutionResult: Final execution status payload.

        Raises:
            ValueError: Raised when job name is not supported.
        """
