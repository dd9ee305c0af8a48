"""An echo server that serves a fixed number of clients, and its client."""

from __future__ import annotations

import socket
import sys

from netlab.greeting import _run_client, _run_server

_BUFFER_SIZE = 1024
_QUIT_LINES = ("Q\n", "q\n")


def echo_connection(conn: socket.socket) -> int:
    """Send back everything read from the connection until the peer closes.

    Returns the number of bytes echoed.
    """
    total = 0
    while data := conn.recv(_BUFFER_SIZE - 1):
        conn.sendall(data)
        total += len(data)
    return total


def serve_clients(server_sock: socket.socket, count: int = 5) -> int:
    """Accept and echo for `count` clients in turn; return how many were served."""
    for number in range(1, count + 1):
        conn, _ = server_sock.accept()
        print(f"Client connected：{number}", flush=True)
        with conn:
            echo_connection(conn)
    return count


def echo_exchange(sock: socket.socket, message: bytes) -> bytes:
    """Send a message and read until as many bytes have come back.

    Raises ConnectionError if the peer closes before the echo is complete.
    """
    sock.sendall(message)
    received = bytearray()
    while len(received) < len(message):
        chunk = sock.recv(_BUFFER_SIZE - 1)
        if not chunk:
            raise ConnectionError("connection closed before the echo was complete")
        received += chunk
    return bytes(received)


def _chat(sock: socket.socket) -> int:
    print("Connected")
    while True:
        print("Input message(Q to quit): ", end="", flush=True)
        line = sys.stdin.readline()
        if not line or line in _QUIT_LINES:
            return 0
        try:
            reply = echo_exchange(sock, line.encode())
        except OSError:
            print("read() error")
            return 1
        print(f"Message from server : {reply.decode(errors='replace')}")


def server_main(argv=None) -> int:
    """Run the echo server for five clients on the given port."""
    return _run_server(argv, "echo-server", serve_clients)


def client_main(argv=None) -> int:
    """Send lines typed on standard input to an echo server and show replies."""
    return _run_client(argv, "echo-client", _chat)