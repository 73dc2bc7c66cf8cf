"""A listening TCP socket that hands itself to a launch function."""

from __future__ import annotations

import socket
from typing import Any, Callable, Optional


class ServerError(Exception):
    """Raised when the listening socket cannot be set up or started."""


class Server:
    """A bound, listening IPv4 stream socket plus the function that serves it."""

    def __init__(
        self,
        host: str = "",
        port: int = 80,
        backlog: int = 10,
        launch: Optional[Callable[["Server"], Any]] = None,
    ) -> None:
        self.host = host
        self.port = port
        self.backlog = backlog
        self.launch = launch
        try:
            self.socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise ServerError("Failed to connect socket...") from exc
        try:
            self.socket.bind((host, port))
        except OSError as exc:
            self.socket.close()
            raise ServerError("Failed to bind socket...") from exc
        try:
            self.socket.listen(backlog)
        except OSError as exc:
            self.socket.close()
            raise ServerError("Failed to start listening...") from exc
        self.address = self.socket.getsockname()

    def run(self) -> Any:
        """Hand the server to its launch function and return what it returns."""
        if self.launch is None:
            raise ServerError("No launch function given")
        return self.launch(self)

    def close(self) -> None:
        """Close the listening socket."""
        self.socket.close()

    def __enter__(self) -> "Server":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()