"""Send a file over TCP with a half-close, and receive it on the other side."""

from __future__ import annotations

import socket
from pathlib import Path

from netlab.greeting import _run_client, _run_server

CHUNK_SIZE = 30
RECEIVED_FILE = "receive.dat"
THANKS = b"Thank you\0"


def send_file(conn: socket.socket, path, chunk_size: int = CHUNK_SIZE) -> bytes:
    """Stream a file to the peer, half-close, and return the peer's reply."""
    if chunk_size <= 0:
        raise ValueError(f"chunk size must be positive: {chunk_size}")
    with open(path, "rb") as source:
        while chunk := source.read(chunk_size):
            conn.sendall(chunk)
    conn.shutdown(socket.SHUT_WR)
    return conn.recv(chunk_size)


def receive_file(sock: socket.socket, path) -> int:
    """Write everything read from the socket to `path`, then thank the peer.

    Returns the number of bytes written.
    """
    total = 0
    with open(path, "wb") as target:
        while chunk := sock.recv(CHUNK_SIZE):
            target.write(chunk)
            total += len(chunk)
    sock.sendall(THANKS)
    return total


def _serve_own_source(server: socket.socket) -> None:
    conn, _ = server.accept()
    with conn:
        reply = send_file(conn, Path(__file__), CHUNK_SIZE)
    text = reply.split(b"\0", 1)[0].decode(errors="replace")
    print(f"message from client: {text}")


def _fetch(sock: socket.socket) -> int:
    receive_file(sock, RECEIVED_FILE)
    print("Received file data")
    return 0


def server_main(argv=None) -> int:
    """Send this module's own source file to one client on the given port."""
    return _run_server(argv, "file-server", _serve_own_source)


def client_main(argv=None) -> int:
    """Receive a file from a file server into receive.dat."""
    return _run_client(argv, "file-client", _fetch)