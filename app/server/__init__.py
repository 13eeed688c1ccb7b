"""Server process package for binding and lifecycle management."""

from .runner import ServerBindError, StatusServer

__all__ = ["ServerBindError", "StatusServer"]
