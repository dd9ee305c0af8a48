"""Byte-order conversion and IPv4 dotted-quad parsing and formatting."""

from __future__ import annotations

import re
import sys

_U16_MAX = 0xFFFF
_U32_MAX = 0xFFFFFFFF

_DEFAULT_PORT = 0x1234
_DEFAULT_ADDRESS = 0x12345678

_PART_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*")

# Largest value allowed for each part, indexed by the number of parts given.
_PART_LIMITS = {
    1: (_U32_MAX,),
    2: (0xFF, 0xFFFFFF),
    3: (0xFF, 0xFF, 0xFFFF),
    4: (0xFF, 0xFF, 0xFF, 0xFF),
}


def _swap_to_network(value: int, size: int, limit: int) -> int:
    if not 0 <= value <= limit:
        raise ValueError(f"value out of range for {size * 8}-bit conversion: {value}")
    return int.from_bytes(value.to_bytes(size, "big"), sys.byteorder)


def htons(value: int) -> int:
    """Return a 16-bit host-order value in network byte order."""
    return _swap_to_network(value, 2, _U16_MAX)


def htonl(value: int) -> int:
    """Return a 32-bit host-order value in network byte order."""
    return _swap_to_network(value, 4, _U32_MAX)


def _parse_part(part: str, text: str) -> int:
    if not _PART_RE.fullmatch(part):
        raise ValueError(f"Invalid IP address: {text}")
    if part[:2].lower() == "0x":
        return int(part[2:], 16)
    if len(part) > 1 and part.startswith("0"):
        return int(part[1:], 8)
    return int(part, 10)


def _pack(text: str) -> bytes:
    parts = text.split(".")
    limits = _PART_LIMITS.get(len(parts))
    if limits is None:
        raise ValueError(f"Invalid IP address: {text}")
    values = [_parse_part(part, text) for part in parts]
    if any(value > limit for value, limit in zip(values, limits)):
        raise ValueError(f"Invalid IP address: {text}")
    *leading, last = values
    tail_size = 4 - len(leading)
    return bytes(leading) + last.to_bytes(tail_size, "big")


def inet_addr(text: str) -> int:
    """Parse an IPv4 address and return it as a network-order 32-bit value.

    Accepts the classic forms: one to four parts, each decimal, octal
    (leading 0) or hexadecimal (leading 0x). Raises ValueError if invalid.
    """
    return int.from_bytes(_pack(text), sys.byteorder)


def inet_ntoa(value: int) -> str:
    """Format a network-order 32-bit value as a dotted-quad string."""
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"address value out of range: {value}")
    return ".".join(str(octet) for octet in value.to_bytes(4, sys.byteorder))


def endian_main(argv=None) -> int:
    """Show a port and an address in host and network byte order.

    Takes an optional hexadecimal port and address; without arguments
    the sample values 1234 and 12345678 are shown.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if args and len(args) != 2:
        print("Usage: endian [<hex port> <hex address>]", file=sys.stderr)
        return 1
    try:
        host_port, host_addr = (
            [int(text, 16) for text in args] if args else [_DEFAULT_PORT, _DEFAULT_ADDRESS]
        )
        rows = [
            ("port", host_port, htons(host_port)),
            ("address", host_addr, htonl(host_addr)),
        ]
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    for label, host_value, net_value in rows:
        print(f"Host ordered {label}: {host_value:x}")
        print(f"Network ordered {label}: {net_value:x}")
    return 0


def inet_addr_main(argv=None) -> int:
    """Convert two sample addresses, stopping at the first invalid one."""
    for text in ("1.5.3.4", "192.168.1.777"):
        try:
            value = inet_addr(text)
        except ValueError:
            print(f"Invalid IP address: {text}", file=sys.stderr)
            return 1
        print(f"IP address: {text} is {value:x}")
    return 0


def inet_ntoa_main(argv=None) -> int:
    """Format two sample addresses: the latest conversion, then a kept copy."""
    kept = inet_ntoa(htonl(0x1020304))
    latest = inet_ntoa(htonl(0x1010101))
    print(latest)
    print(kept)
    return 0