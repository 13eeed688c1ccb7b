"""Job-layer README sync orchestrator with strictly sequential steps."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from app.adapters import RunnerPort, StatusApiError, StatusApiPort
from app.domain import StatusPayloadError, domain_parse_status_payload
from app.readme import (
    ReadmeError,
    readme_render_status_markdown,
    readme_resolve_path,
    readme_update_file,
)

from .interfaces import JobExecutionResult, JobOrchestratorPort, ReadmeSyncResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReadmeSyncConfig:
    """Configuration values for README sync execution.

    Attributes:
        api_url: Status endpoint to poll.
        workspace: Repository checkout root containing the README.
    """

    api_url: str
    workspace: str = "."


class ReadmeSyncOrchestrator(JobOrchestratorPort):
    """Fetch a remote status payload and splice it into the workspace README.

    Steps run in order: fetch, validate, render, locate, splice and persist,
    report. The first failing step aborts the run; the README is written only
    after every earlier step succeeded.
    """

    _README_SYNC_JOB_NAME = "readme_sync"

    def __init__(self, status_api: StatusApiPort, runner: RunnerPort, config: ReadmeSyncConfig):
        """Initialize README sync orchestrator dependencies.

        Args:
            status_api: Adapter for fetching the remote status document.
            runner: CI runner adapter for outputs and failure reporting.
            config: Sync execution configuration.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when dependencies or config values are invalid.
        """

        if status_api is None:
            raise ValueError("status_api must not be None")
        if runner is None:
            raise ValueError("runner must not be None")
        if not config.api_url.strip():
            raise ValueError("config.api_url must not be blank")
        if not config.workspace.strip():
            raise ValueError("config.workspace must not be blank")

        self._status_api = status_api
        self._runner = runner
        self._config = config

    def job_supported_names(self) -> tuple[str, ...]:
        """Return supported job names.

        Returns:
            tuple[str, ...]: Supported job names.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        return (self._README_SYNC_JOB_NAME,)

    def job_execute(self, job_name: str) -> JobExecutionResult:
        """Run the README sync and report the outcome to the runner.

        Args:
            job_name: Workflow name; must be `readme_sync`.

        Returns:
            JobExecutionResult: `success` with the sync result, or `failed`
                with the error message.

        Raises:
            ValueError: Raised when job name is not supported.
        """

        if job_name not in self.job_supported_names():
            raise ValueError(f"Unsupported job name: {job_name}")

        try:
            sync_result = self._job_run_steps()
        except (StatusApiError, StatusPayloadError, ReadmeError, OSError) as error:
            logger.error("README sync failed: %s", error)
            self._runner.runner_set_failed(str(error))
            return JobExecutionResult(job_name=job_name, status="failed", error_message=str(error))

        return JobExecutionResult(job_name=job_name, status="success", sync_result=sync_result)

    def _job_run_steps(self) -> ReadmeSyncResult:
        response_data = self._status_api.adapter_fetch_status(self._config.api_url)
        payload = domain_parse_status_payload(response_data)

        markdown = readme_render_status_markdown(payload)
        logger.info("Generated Markdown:\n%s", markdown)

        readme_path = readme_resolve_path(self._config.workspace)
        readme_update_file(readme_path, markdown)

        self._runner.runner_set_output("status", payload.status)
        self._runner.runner_set_output("service", payload.service)
        self._runner.runner_set_output("timestamp", payload.timestamp)
        return ReadmeSyncResult(
            status=payload.status,
            service=payload.service,
            timestamp=payload.timestamp,
            readme_path=readme_path,
        )
