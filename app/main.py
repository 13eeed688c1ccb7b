"""Main module entrypoint for local and CI runtime execution.

This module validates startup configuration and launches either the status
server or a single README sync run.
"""

import argparse
import logging

from app.adapters import GitHubActionsRunner
from app.bootstrap import bootstrap_create_readme_sync_orchestrator, bootstrap_create_server
from app.config import SettingsLoadError, config_load_settings
from app.logging_setup import logging_configure
from app.server import ServerBindError

logger = logging.getLogger(__name__)


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 when the selected command fails.
    """

    argument_parser = argparse.ArgumentParser(description="Status server and README status sync")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="serve",
        choices=("serve", "readme-sync"),
        help="Runtime command: `serve` starts the status server, `readme-sync` fetches a status "
        "payload once and splices it into README.md",
        type=str,
    )
    argument_parser.add_argument(
        "--api-url",
        dest="api_url",
        type=str,
        help="Status endpoint for `readme-sync`; defaults to the `api-url` action input",
    )
    argument_parser.add_argument(
        "--workspace",
        dest="workspace",
        type=str,
        help="Workspace root containing README.md for `readme-sync`; defaults to GITHUB_WORKSPACE",
    )
    parsed_arguments = argument_parser.parse_args()

    if parsed_arguments.command == "readme-sync":
        main_run_readme_sync(api_url=parsed_arguments.api_url, workspace=parsed_arguments.workspace)
        return

    main_run_server()


def main_run_server() -> None:
    """Serve the status application until a termination signal.

    Returns:
        None: Returns after a clean shutdown.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with status 1 when the listen port is unavailable.
    """

    settings = config_load_settings()
    logging_configure(settings.log_level)
    server = bootstrap_create_server(settings)
    try:
        server.server_serve()
    except ServerBindError as error:
        logger.error("Server failed to start: %s", error)
        raise SystemExit(1) from error


def main_run_readme_sync(api_url: str | None = None, workspace: str | None = None) -> None:
    """Run one README sync and map failure onto a non-zero exit status.

    Args:
        api_url: Optional endpoint override.
        workspace: Optional workspace root override.

    Returns:
        None: Returns when the sync succeeded.

    Raises:
        SystemExit: Raised with status 1 when configuration or the sync fails.
    """

    logging_configure()
    try:
        orchestrator = bootstrap_create_readme_sync_orchestrator(api_url=api_url, workspace=workspace)
    except SettingsLoadError as error:
        logger.error("%s", error)
        GitHubActionsRunner().runner_set_failed(str(error))
        raise SystemExit(1) from error

    execution_result = orchestrator.job_execute(job_name="readme_sync")
    if execution_result.status != "success":
        raise SystemExit(1)


if __name__ == "__main__":
    main()
