"""A calculator protocol: operands and an operator sent, a 32-bit result returned.

A request is one count byte, that many 4-byte host-order signed integers,
and one operator byte. The reply is a 4-byte host-order signed integer.
"""

from __future__ import annotations

import math
import socket
import struct
import sys
from collections.abc import Iterable, Iterator

from netlab.sockets import connect, open_server, parse_port

_INT = struct.Struct("=i")
_MAX_OPERANDS = 0xFF
_CLIENTS = 5


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def calculate(operands: Iterable[int], operator: str) -> int:
    """Fold the operands with '+', '-' or '*' as 32-bit signed integers.

    Any other operator yields the first operand. Raises ValueError when
    there are no operands.
    """
    values = list(operands)
    if not values:
        raise ValueError("at least one operand is required")
    first, *rest = values
    if operator == "+":
        result = first + sum(rest)
    elif operator == "-":
        result = first - sum(rest)
    elif operator == "*":
        result = math.prod(values)
    else:
        result = first
    return _wrap_int32(result)


def encode_request(operands: Iterable[int], operator: str) -> bytes:
    """Build the wire form of a request."""
    values = list(operands)
    if len(values) > _MAX_OPERANDS:
        raise ValueError(f"too many operands: {len(values)}")
    try:
        op_byte = operator.encode("latin-1")
    except UnicodeEncodeError as exc:
        raise ValueError(f"invalid operator: {operator!r}") from exc
    if len(op_byte) != 1:
        raise ValueError(f"operator must be one character: {operator!r}")
    try:
        body = b"".join(_INT.pack(value) for value in values)
    except struct.error as exc:
        raise ValueError(f"operand out of 32-bit range: {exc}") from exc
    return bytes([len(values)]) + body + op_byte


def decode_request(data: bytes) -> tuple[list[int], str]:
    """Split the wire form of a request into operands and operator."""
    if len(data) < 2:
        raise ValueError("request too short")
    count = data[0]
    expected = 2 + count * _INT.size
    if len(data) != expected:
        raise ValueError(f"request length {len(data)} does not match {expected}")
    body = data[1 : 1 + count * _INT.size]
    operands = [value for (value,) in _INT.iter_unpack(body)]
    return operands, chr(data[-1])


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    data = bytearray()
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            raise ConnectionError("connection closed before the message was complete")
        data += chunk
    return bytes(data)


def read_request(conn: socket.socket) -> tuple[list[int], str]:
    """Read one whole request from the connection."""
    header = _recv_exact(conn, 1)
    body = _recv_exact(conn, header[0] * _INT.size + 1)
    return decode_request(header + body)


def handle_client(conn: socket.socket) -> int:
    """Read a request, compute it, print and send back the result."""
    operands, operator = read_request(conn)
    result = calculate(operands, operator)
    print(f"result: {result}", flush=True)
    conn.sendall(_INT.pack(result))
    return result


def request(sock: socket.socket, operands: Iterable[int], operator: str) -> int:
    """Send a request and return the server's result."""
    sock.sendall(encode_request(operands, operator))
    (result,) = _INT.unpack(_recv_exact(sock, _INT.size))
    return result


def server_main(argv=None) -> int:
    """Answer calculation requests from five clients on the given port."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: op-server <port>", file=sys.stderr)
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
        for _ in range(_CLIENTS):
            try:
                conn, _ = server.accept()
            except OSError:
                print("Error accepting connection", file=sys.stderr)
                return 1
            with conn:
                try:
                    handle_client(conn)
                except (OSError, ValueError) as exc:
                    print(f"Bad request: {exc}", file=sys.stderr)
    return 0


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _prompt(text: str, tokens: Iterator[str]) -> str:
    print(text, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise ValueError("unexpected end of input")
    return token


def _prompt_int(text: str, tokens: Iterator[str]) -> int:
    token = _prompt(text, tokens)
    try:
        return int(token)
    except ValueError as exc:
        raise ValueError(f"not a number: {token!r}") from exc


def client_main(argv=None) -> int:
    """Ask for operands and an operator, then print the server's result."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage : op-client <IP> <port>")
        return 1
    try:
        sock = connect(args[0], parse_port(args[1]))
    except (ValueError, OSError):
        print("connect() error")
        return 1
    with sock:
        print("Connected")
        tokens = _tokens(sys.stdin)
        try:
            count = _prompt_int("Operand count:", tokens)
            operands = [
                _prompt_int(f"Operand{i}: ", tokens) for i in range(1, count + 1)
            ]
            operator = _prompt("Operator:", tokens)[0]
            result = request(sock, operands, operator)
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
        except OSError:
            print("read() error")
            return 1
    print(f"Operation's result: {result}")
    return 0