"""Status and health endpoint router composition."""

from dataclasses import asdict

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.config import AppSettings
from app.domain import HealthPayload, ServerRuntime


def api_create_status_router(settings: AppSettings, runtime: ServerRuntime) -> APIRouter:
    """Create router exposing runtime status and liveness endpoints.

    Args:
        settings: Validated application settings used for the service identifier.
        runtime: Process runtime state captured at server startup.

    Returns:
        APIRouter: Router exposing `/status` and `/health` endpoints.

    Raises:
        ValueError: Raised when runtime is invalid.
    """

    if runtime is None:
        raise ValueError("runtime must not be None")

    router = APIRouter(tags=["status"])

    @router.get("/status")
    def api_status() -> JSONResponse:
        """Return a fresh status payload with current timestamp and uptime.

        Returns:
            JSONResponse: Status payload built for this request.

        Raises:
            ValueError: Raised when the runtime clock is misconfigured.
        """

        payload = runtime.runtime_build_status(service_name=settings.service_name)
        return JSONResponse(content=payload.payload_to_dict(), status_code=status.HTTP_200_OK)

    @router.get("/health")
    def api_health() -> JSONResponse:
        """Return constant liveness payload."""

        return JSONResponse(content=asdict(HealthPayload()), status_code=status.HTTP_200_OK)

    return router
