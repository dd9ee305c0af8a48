import io
import socket
from concurrent.futures import ThreadPoolExecutor

import pytest

from netlab import echo
from netlab.sockets import open_server


@pytest.fixture
def pair():
    a, b = socket.socketpair()
    a.settimeout(5)
    b.settimeout(5)
    with a, b:
        yield a, b


@pytest.fixture
def echo_server():
    """Return a function that serves `count` clients in the background, and the port."""
    server = open_server(0)
    with server, ThreadPoolExecutor(1) as pool:
        yield (lambda count: pool.submit(echo.serve_clients, server, count)), server.getsockname()[1]


def test_echo_exchange_round_trip_large_payload(pair):
    a, b = pair
    payload = bytes(range(256)) * 40
    with ThreadPoolExecutor(1) as pool:
        future = pool.submit(echo.echo_connection, b)
        assert echo.echo_exchange(a, payload) == payload
        a.shutdown(socket.SHUT_WR)
        assert future.result(timeout=5) == len(payload)


def test_echo_exchange_peer_closed_raises(pair):
    a, b = pair
    b.close()
    with pytest.raises(ConnectionError):
        echo.echo_exchange(a, b"ping\n")


def test_echo_exchange_partial_reply_raises(pair):
    a, b = pair

    def half_echo():
        data = b.recv(64)
        b.sendall(data[:2])
        b.close()

    with ThreadPoolExecutor(1) as pool:
        future = pool.submit(half_echo)
        with pytest.raises(ConnectionError):
            echo.echo_exchange(a, b"longer message")
        future.result(timeout=5)


def test_serve_clients_serves_each_client(echo_server, capsys):
    start, port = echo_server
    future = start(2)
    for text in (b"first\n", b"second\n"):
        with socket.create_connection(("127.0.0.1", port), timeout=5) as client:
            assert echo.echo_exchange(client, text) == text
    assert future.result(timeout=5) == 2
    out = capsys.readouterr().out
    assert "Client connected：1" in out
    assert "Client connected：2" in out


@pytest.mark.parametrize(
    "typed, replies",
    [("hi there\nagain\nQ\n", ["hi there", "again"]), ("", [])],
)
def test_client_main_exchanges_lines(echo_server, monkeypatch, capsys, typed, replies):
    start, port = echo_server
    monkeypatch.setattr("sys.stdin", io.StringIO(typed))
    future = start(1)
    assert echo.client_main(["127.0.0.1", str(port)]) == 0
    assert future.result(timeout=5) == 1
    out = capsys.readouterr().out
    assert "Connected" in out
    assert out.count("Message from server") == len(replies)
    for reply in replies:
        assert f"Message from server : {reply}\n" in out


@pytest.mark.parametrize(
    "main, args, stream, text",
    [
        (echo.client_main, ["127.0.0.1"], "out", "Usage"),
        (echo.client_main, ["10.0.0.256", "7"], "out", "connect() error"),
        (echo.server_main, ["1", "2", "3"], "err", "Usage"),
        (echo.server_main, ["echo"], "err", "invalid port"),
    ],
)
def test_main_reports_errors(capsys, main, args, stream, text):
    assert main(args) == 1
    assert text in getattr(capsys.readouterr(), stream)