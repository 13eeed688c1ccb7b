"""API layer package for FastAPI application and route composition."""

from .application import API_AVAILABLE_PATHS, API_ENDPOINTS, create_api_application

__all__ = ["API_AVAILABLE_PATHS", "API_ENDPOINTS", "create_api_application"]
