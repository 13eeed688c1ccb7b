"""uvicorn process runner with bounded graceful shutdown."""

from __future__ import annotations

import contextlib
import logging
import os
import signal
import socket
import threading
from types import FrameType
from typing import Callable, Iterator

import uvicorn
from fastapi import FastAPI
from uvicorn.server import HANDLED_SIGNALS

from app.config import AppSettings

logger = logging.getLogger(__name__)


class ServerBindError(OSError):
    """Raised when the configured listen address cannot be bound."""


class StatusServer(uvicorn.Server):
    """uvicorn server that binds its own socket and bounds shutdown time.

    The first termination signal stops accepting connections and lets
    in-flight requests drain. A watchdog armed at that moment force-exits the
    process with status 1 once `shutdown_timeout_seconds` elapses.
    """

    def __init__(
        self,
        settings: AppSettings,
        application: FastAPI,
        force_exit: Callable[[int], None] | None = None,
    ):
        """Initialize server runner.

        Args:
            settings: Validated application settings with bind address and shutdown timeout.
            application: ASGI application to serve.
            force_exit: Optional process terminator invoked with the exit status
                when the shutdown deadline passes.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when application is None.
        """

        if application is None:
            raise ValueError("application must not be None")

        super().__init__(
            uvicorn.Config(
                application,
                host=settings.application_host,
                port=settings.application_port,
                log_level=settings.log_level.lower(),
            )
        )
        self._settings = settings
        self._force_exit = force_exit or os._exit
        self._shutdown_watchdog: threading.Timer | None = None

    def server_bind_socket(self) -> socket.socket:
        """Bind the listen socket for the configured host and port.

        Returns:
            socket.socket: Bound, inheritable socket ready to be served.

        Raises:
            ServerBindError: Raised when the address is already in use or unavailable.
        """

        host = self._settings.application_host
        port = self._settings.application_port
        family = socket.AF_INET6 if ":" in host else socket.AF_INET
        listen_socket = socket.socket(family, socket.SOCK_STREAM)
        listen_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            listen_socket.bind((host, port))
        except OSError as error:
            listen_socket.close()
            logger.error("Unable to bind %s:%s: %s", host, port, error)
            raise ServerBindError(error.errno, f"Port {port} is unavailable: {error.strerror}") from error
        listen_socket.set_inheritable(True)
        return listen_socket

    def server_serve(self) -> None:
        """Bind, serve until a termination signal, and drain in-flight requests.

        Returns:
            None: Returns after a clean shutdown.

        Raises:
            ServerBindError: Raised when the listen port is already bound.
        """

        listen_socket = self.server_bind_socket()
        logger.info("Server is running on port %s", self._settings.application_port)
        try:
            self.run(sockets=[listen_socket])
        finally:
            self.server_cancel_watchdog()
            listen_socket.close()
        logger.info("HTTP server closed")

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        if self._shutdown_watchdog is None:
            logger.info("%s signal received: closing HTTP server", signal.Signals(sig).name)
            self._shutdown_watchdog = threading.Timer(
                self._settings.shutdown_timeout_seconds,
                self._server_force_exit,
            )
            self._shutdown_watchdog.daemon = True
            self._shutdown_watchdog.start()
        super().handle_exit(sig, frame)

    @contextlib.contextmanager
    def capture_signals(self) -> Iterator[None]:
        # Signals are consumed here so a drained shutdown exits with status 0.
        if threading.current_thread() is not threading.main_thread():
            yield
            return
        original_handlers = {sig: signal.signal(sig, self.handle_exit) for sig in HANDLED_SIGNALS}
        try:
            yield
        finally:
            for sig, handler in original_handlers.items():
                signal.signal(sig, handler)

    def server_cancel_watchdog(self) -> None:
        """Disarm the shutdown watchdog once serving has returned."""

        if self._shutdown_watchdog is not None:
            self._shutdown_watchdog.cancel()

    def _server_force_exit(self) -> None:
        logger.error(
            "Could not close connections in time, forcefully shutting down after %ss",
            self._settings.shutdown_timeout_seconds,
        )
        self._force_exit(1)
