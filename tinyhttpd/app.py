"""The HTTP server program: answers every connection with a fixed page."""

from __future__ import annotations

import argparse
import functools
import socket
import sys
from typing import Optional, Sequence

from tinyhttpd.server import Server, ServerError

BUFFER_SIZE = 30000

_HTTP_HEADER = (
    "HTTP/1.1 200 OK\n"
    "Server: JHB_c_Server\n"
    "Content-Type: text/html\n"
    "Connection: Closed\n\n"
)
_HTML = "<html><body><h1>Hello , Die is Jan-Hendrik se HTTP Server !</h1></body></html>"

_HELLO_WORLD = (
    "HTTP/1.1 200 OK\n"
    "Date: 28 Dec 2023\n"
    "Server: JHB c server\n"
    "Content-Length: 88\n"
    "Content-Type: text/html\n"
    "Connection: Closed\n"
    "<html><body><h1>Hello, World !</h1></body></html>"
)


def build_response() -> bytes:
    """Return the response the server sends: header block followed by the page."""
    return (_HTTP_HEADER + _HTML).encode("ascii")


def hello_world_response() -> bytes:
    """Return the plain hello-world response."""
    return _HELLO_WORLD.encode("ascii")


def handle_connection(connection: socket.socket, response: bytes) -> bytes:
    """Read the request, echo it to stdout, send ``response`` and close."""
    with connection:
        request = connection.recv(BUFFER_SIZE)
        print(request.decode("utf-8", errors="replace"), end="")
        connection.sendall(response)
    return request


def _serve(
    server: Server, content: bytes, max_connections: Optional[int] = None
) -> int:
    """Answer connections with ``content``; stop after ``max_connections`` if given."""
    served = 0
    while max_connections is None or served < max_connections:
        print("===== WAITING FOR CONNECTION =====", flush=True)
        connection, _ = server.socket.accept()
        print("\n\n===== CONNECTION SUCCESS =====")
        handle_connection(connection, content)
        served += 1
    return served


def launch(server: Server, max_connections: Optional[int] = None) -> int:
    """Serve the fixed page one connection at a time; stop after ``max_connections`` if given."""
    return _serve(server, build_response(), max_connections)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the server and answer every request with the fixed page."""
    parser = argparse.ArgumentParser(description="Serve a fixed HTML page.")
    parser.add_argument("--host", default="", help="address to bind (default: all)")
    parser.add_argument("--port", type=int, default=80)
    parser.add_argument("--backlog", type=int, default=10)
    parser.add_argument("--max-connections", type=int, default=None)
    parser.add_argument(
        "--hello-world",
        action="store_true",
        help="send the plain hello-world response instead",
    )
    args = parser.parse_args(argv)

    if args.hello_world:
        content = hello_world_response()
        runner = functools.partial(
            _serve, content=content, max_connections=args.max_connections
        )
    else:
        content = build_response()
        runner = functools.partial(launch, max_connections=args.max_connections)

    print(f"\n\n{content.decode('ascii')}\n\n")
    try:
        server = Server(args.host, args.port, args.backlog, runner)
    except ServerError as exc:
        print(f"{exc}: {exc.__cause__}", file=sys.stderr)
        return 1
    with server:
        server.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())