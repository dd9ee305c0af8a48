"""Host name and address lookups with a printable summary."""

from __future__ import annotations

import socket
import sys
from dataclasses import dataclass

from netlab.addr import inet_addr, inet_ntoa


@dataclass(frozen=True)
class HostInfo:
    """Resolved host entry: official name, aliases, family and addresses."""

    name: str
    aliases: tuple[str, ...] = ()
    address_type: int = socket.AF_INET
    addresses: tuple[str, ...] = ()


def lookup_name(name: str) -> HostInfo:
    """Resolve a host name; raise LookupError if it cannot be found."""
    try:
        official, aliases, addresses = socket.gethostbyname_ex(name)
    except (OSError, UnicodeError) as exc:
        raise LookupError(f"host not found: {name}") from exc
    return HostInfo(official, tuple(aliases), socket.AF_INET, tuple(addresses))


def lookup_address(ip: str) -> HostInfo:
    """Reverse-resolve a dotted IPv4 address.

    Raises ValueError for a malformed address and LookupError if no host
    entry is found.
    """
    address = inet_ntoa(inet_addr(ip))
    try:
        official, aliases, addresses = socket.gethostbyaddr(address)
    except (OSError, UnicodeError) as exc:
        raise LookupError(f"no host for address: {ip}") from exc
    return HostInfo(official, tuple(aliases), socket.AF_INET, tuple(addresses))


def format_host(info: HostInfo) -> str:
    """Render a host entry as numbered lines."""
    family = "AF_INET" if info.address_type == socket.AF_INET else "AF_INET6"
    lines = [f"Official name: {info.name}"]
    lines += [f"Alias {i}: {alias}" for i, alias in enumerate(info.aliases, 1)]
    lines.append(f"Address type: {family}")
    lines += [f"IP Address {i}: {addr}" for i, addr in enumerate(info.addresses, 1)]
    return "\n".join(lines)


def byname_main(argv=None) -> int:
    """Print the host entry for a name given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: hostbyname <IP>")
        return 1
    try:
        info = lookup_name(args[0])
    except LookupError:
        print("Host not found")
        return 1
    print(format_host(info))
    return 0


def byaddr_main(argv=None) -> int:
    """Print the host entry for an address given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: hostbyaddr <IP>")
        return 1
    try:
        info = lookup_address(args[0])
    except (ValueError, LookupError):
        return 1
    print(format_host(info))
    return 0