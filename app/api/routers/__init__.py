"""API router package for endpoint composition."""

from .status import api_create_status_router

__all__ = ["api_create_status_router"]
