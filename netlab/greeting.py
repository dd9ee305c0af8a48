"""A server that greets one client and a client that reads the greeting.

Also holds the argument handling shared by the small servers and clients.
"""

from __future__ import annotations

import socket
import sys
from typing import Callable

from netlab.sockets import connect, open_server, parse_port

DEFAULT_MESSAGE = b"Hello, Client!"
_CHUNK = 1024


def _run_server(argv, name: str, serve: Callable[[socket.socket], object]) -> int:
    """Parse `<port>`, open a listening socket and hand it to `serve`."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(f"Usage: {name} <port>", file=sys.stderr)
        return 1
    try:
        port = parse_port(args[0])
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        server = open_server(port, 5)
    except OSError:
        print("Error binding socket", file=sys.stderr)
        return 1
    with server:
        try:
            serve(server)
        except OSError:
            print("Error accepting connection", file=sys.stderr)
            return 1
    return 0


def _run_client(argv, name: str, talk: Callable[[socket.socket], int]) -> int:
    """Parse `<IP> <port>`, connect, and return what `talk` returns."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print(f"Usage : {name} <IP> <port>")
        return 1
    try:
        sock = connect(args[0], parse_port(args[1]))
    except (ValueError, OSError):
        print("connect() error")
        return 1
    with sock:
        return talk(sock)


def serve_once(server_sock: socket.socket, message: bytes = DEFAULT_MESSAGE) -> None:
    """Accept one connection, send the message and close it."""
    conn, _ = server_sock.accept()
    with conn:
        conn.sendall(message)


def receive_all(sock: socket.socket) -> bytes:
    """Read from the socket until the peer closes it."""
    chunks = []
    while chunk := sock.recv(_CHUNK):
        chunks.append(chunk)
    return b"".join(chunks)


def _show_greeting(sock: socket.socket) -> int:
    try:
        data = receive_all(sock)
    except OSError:
        print("read() error")
        return 1
    print(f"Message from server : {data.decode(errors='replace')}")
    print(f"Read {len(data)} bytes")
    return 0


def server_main(argv=None) -> int:
    """Serve the greeting to a single client on the given port."""
    return _run_server(argv, "greeting-server", serve_once)


def client_main(argv=None) -> int:
    """Connect to a greeting server and print what it sent."""
    return _run_client(argv, "greeting-client", _show_greeting)