"""FastAPI application factory for the status server.

This module composes routers, the not-found contract, and the response headers
shared by every endpoint.
"""

from dataclasses import asdict
from typing import Final

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import AppSettings
from app.domain import APPLICATION_VERSION, InfoPayload, ServerRuntime

from .routers import api_create_status_router

API_ENDPOINTS: Final[dict[str, str]] = {
    "status": "/status",
    "health": "/health",
    "info": "/",
}
API_AVAILABLE_PATHS: Final[list[str]] = ["/", "/status", "/health"]


def api_not_found_response() -> JSONResponse:
    """Build the 404 payload returned for unknown paths and methods.

    Returns:
        JSONResponse: Not-found payload listing available endpoints.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return JSONResponse(
        content={"error": "Not Found", "availableEndpoints": list(API_AVAILABLE_PATHS)},
        status_code=status.HTTP_404_NOT_FOUND,
    )


def create_api_application(settings: AppSettings, runtime: ServerRuntime) -> FastAPI:
    """Create the FastAPI application instance for the status server.

    Args:
        settings: Validated application settings used for runtime metadata.
        runtime: Process runtime state captured once at startup.

    Returns:
        FastAPI: Framework application instance serving JSON endpoints.

    Raises:
        ValueError: Raised when runtime is invalid.
    """

    application = FastAPI(
        title=settings.service_name,
        version=APPLICATION_VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @application.middleware("http")
    async def api_apply_common_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    @application.exception_handler(StarletteHTTPException)
    async def api_handle_http_exception(request: Request, error: StarletteHTTPException) -> JSONResponse:
        """Map routing failures onto the not-found contract.

        Unknown paths (404) and unsupported methods on known paths (405) are
        both reported as 404.

        Args:
            request: Incoming request.
            error: Framework HTTP exception.

        Returns:
            JSONResponse: JSON error payload.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        _ = request
        if error.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return api_not_found_response()
        return JSONResponse(content={"error": str(error.detail)}, status_code=error.status_code)

    @application.get("/", tags=["info"])
    def api_info() -> JSONResponse:
        """Return service metadata and the endpoint map.

        Returns:
            JSONResponse: Constant info payload.

        Raises:
            RuntimeError: Raised if route handler cannot produce a response.
        """

        payload = InfoPayload(
            name=settings.service_name,
            version=APPLICATION_VERSION,
            endpoints=dict(API_ENDPOINTS),
        )
        return JSONResponse(content=asdict(payload), status_code=status.HTTP_200_OK)

    application.include_router(api_create_status_router(settings=settings, runtime=runtime))

    return application
