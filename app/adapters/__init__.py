"""Adapter layer package for remote status and CI runner boundaries."""

from .github_actions import GitHubActionsRunner
from .interfaces import RunnerPort, StatusApiPort
from .status_api import StatusApiAdapter
from .status_api_errors import (
    StatusApiConnectionError,
    StatusApiError,
    StatusApiHttpError,
    StatusApiResponseError,
    StatusApiTimeoutError,
)

__all__ = [
    "GitHubActionsRunner",
    "RunnerPort",
    "StatusApiAdapter",
    "StatusApiConnectionError",
    "StatusApiError",
    "StatusApiHttpError",
    "StatusApiPort",
    "StatusApiResponseError",
    "StatusApiTimeoutError",
]
