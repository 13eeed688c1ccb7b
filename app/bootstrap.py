"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from app.adapters import GitHubActionsRunner, StatusApiAdapter
from app.api import create_api_application
from app.config import AppSettings, config_load_action_settings, config_load_settings
from app.domain import ServerRuntime
from app.jobs import ReadmeSyncConfig, ReadmeSyncOrchestrator
from app.server import StatusServer


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the status application with a fresh process runtime.

    Args:
        settings: Optional pre-validated settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return create_api_application(settings=resolved_settings, runtime=ServerRuntime())


def bootstrap_create_server(settings: AppSettings) -> StatusServer:
    """Build the server runner around a newly assembled application.

    Args:
        settings: Validated application settings.

    Returns:
        StatusServer: Server runner ready to bind and serve.

    Raises:
        ValueError: Raised when application assembly fails.
    """

    application = bootstrap_create_application(settings=settings)
    return StatusServer(settings=settings, application=application)


def bootstrap_create_readme_sync_orchestrator(
    api_url: str | None = None,
    workspace: str | None = None,
) -> ReadmeSyncOrchestrator:
    """Build README sync orchestrator for the CI trigger surface.

    Args:
        api_url: Optional endpoint override for the `api-url` input.
        workspace: Optional workspace root override for `GITHUB_WORKSPACE`.

    Returns:
        ReadmeSyncOrchestrator: Fully wired README sync orchestrator instance.

    Raises:
        SettingsLoadError: Raised when sync configuration validation fails.
    """

    settings = config_load_action_settings(api_url=api_url, github_workspace=workspace)
    return ReadmeSyncOrchestrator(
        status_api=StatusApiAdapter(request_timeout_seconds=settings.request_timeout_seconds),
        runner=GitHubActionsRunner(output_path=settings.github_output),
        config=ReadmeSyncConfig(api_url=settings.api_url, workspace=settings.github_workspace),
    )
