# netlab

A set of small TCP/IP exercises, usable as a library and as command-line tools:

- byte-order conversion and dotted-quad address handling (`netlab.addr`)
- shared helpers to open a listening socket or connect to one (`netlab.sockets`)
- host-name and reverse-address lookup (`netlab.hostinfo`)
- a one-shot greeting server and its client (`netlab.greeting`)
- an echo server and an interactive echo client (`netlab.echo`)
- a file sender and receiver (`netlab.filetransfer`)
- a tiny calculator protocol: a client sends operands and an operator, the
  server replies with the result (`netlab.opcalc`)

It needs nothing beyond the Python standard library (3.10 or later).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

### Addresses and byte order

```
netlab-endian
netlab-endian 1234 12345678
```

Prints a port and an address in host and network byte order, in hexadecimal.
Without arguments the values `1234` and `12345678` are used; otherwise give
both a port and an address in hexadecimal.

```
netlab-inet-addr
```

Converts `1.5.3.4` to its network-order value, then reports
`192.168.1.777` as an invalid address and exits with status 1.

```
netlab-inet-ntoa
```

Formats two network-order values as dotted quads and prints `1.1.1.1`
followed by `1.2.3.4`.

### Host lookup

```
netlab-gethostbyname localhost
netlab-gethostbyaddr 127.0.0.1
```

Each prints the official name, any aliases, the address type and the IPv4
addresses of the host. `netlab-gethostbyname` prints `Host not found` when
the name does not resolve; `netlab-gethostbyaddr` exits with status 1,
printing nothing, when the address is malformed or has no host entry.

### Servers and clients

Socket programs come in server/client pairs. Start the server with a port,
then the client with the server's dotted IPv4 address and the same port:

```
netlab-tcp-server 9190
netlab-tcp-client 127.0.0.1 9190
```

The greeting server sends `Hello, Client!` to the first client and exits; the
client prints what it received and how many bytes it read.

```
netlab-echo-server 9190
netlab-echo-client 127.0.0.1 9190
```

The echo server serves five clients one after another and sends back
everything it receives. The client reads lines from standard input, sends
each one and prints the echo; enter `Q` or `q` (or end the input) to quit.

```
netlab-file-server 9190
netlab-file-client 127.0.0.1 9190
```

The file server sends the source file of the `netlab.filetransfer` module to
one client in 30-byte pieces and then half-closes the connection. The client
writes what it receives to `receive.dat` in the current directory and
answers `Thank you`, which the server prints.

```
netlab-op-server 9190
netlab-op-client 127.0.0.1 9190
```

The calculator client asks for the operand count, each operand and an
operator, and prints the result computed by the server. The server answers
five clients, one after another. `+`, `-` and `*` fold the operands left to
right as 32-bit signed integers (results wrap around); any other operator
yields the first operand.

## Library use

```python
from netlab.addr import htonl, inet_addr, inet_ntoa
from netlab.opcalc import calculate, encode_request, decode_request
from netlab.hostinfo import lookup_name, format_host

print(inet_ntoa(inet_addr("10.0.0.1")))  # 10.0.0.1
print(inet_ntoa(htonl(0x01020304)))      # 1.2.3.4

print(calculate([10, 3, 2], "-"))        # 5

payload = encode_request([4, 5], "*")
print(decode_request(payload))           # ([4, 5], '*')

print(format_host(lookup_name("localhost")))
```

`inet_addr` accepts one to four parts, each in decimal, octal (leading `0`)
or hexadecimal (leading `0x`), and raises `ValueError` for anything else.
`lookup_name` and `lookup_address` raise `LookupError` when nothing is found
and return a `HostInfo` with `name`, `aliases`, `address_type` and
`addresses`.

The helpers in `netlab.sockets` (`parse_port`, `open_server`, `connect`)
are shared by the servers and clients. Each protocol module also exposes
its building blocks: `serve_once` and `receive_all` in `netlab.greeting`;
`echo_connection`, `serve_clients` and `echo_exchange` in `netlab.echo`;
`send_file` and `receive_file` in `netlab.filetransfer`; `read_request`,
`handle_client` and `request` in `netlab.opcalc`.

## What it does not do

- Servers handle one client at a time; there is no concurrent serving.
- Only IPv4 is supported, and clients take a dotted address, not a host name.
- The file server always sends its own module file; there is no option to
  choose another file, and the client always writes `receive.dat`.