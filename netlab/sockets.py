"""Helpers for opening IPv4 TCP servers and connections."""

from __future__ import annotations

import socket

from netlab.addr import inet_addr, inet_ntoa


def parse_port(text: str) -> int:
    """Parse a TCP port number, raising ValueError if it is not valid."""
    stripped = text.strip()
    if not stripped.isdigit():
        raise ValueError(f"invalid port: {text!r}")
    port = int(stripped)
    if port > 0xFFFF:
        raise ValueError(f"port out of range: {port}")
    return port


def open_server(port: int, backlog: int = 5) -> socket.socket:
    """Bind a TCP socket on all IPv4 interfaces and start listening."""
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        server.bind(("", port))
        server.listen(backlog)
    except OSError:
        server.close()
        raise
    return server


def connect(host: str, port: int) -> socket.socket:
    """Connect to a dotted IPv4 address and port."""
    address = inet_ntoa(inet_addr(host))
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.connect((address, port))
    except OSError:
        sock.close()
        raise
    return sock