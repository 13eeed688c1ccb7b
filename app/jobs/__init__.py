"""Job layer package for workflow orchestration boundaries."""

from .interfaces import JobExecutionResult, JobOrchestratorPort, ReadmeSyncResult
from .readme_sync import ReadmeSyncConfig, ReadmeSyncOrchestrator

__all__ = [
    "JobExecutionResult",
    "JobOrchestratorPort",
    "ReadmeSyncConfig",
    "ReadmeSyncOrchestrator",
    "ReadmeSyncResult",
]
