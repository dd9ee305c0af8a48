import io
import socket
import struct
from concurrent.futures import ThreadPoolExecutor

import pytest

from netlab import opcalc
from netlab.sockets import open_server


@pytest.fixture
def pair():
    a, b = socket.socketpair()
    a.settimeout(5)
    b.settimeout(5)
    with a, b:
        yield a, b


@pytest.mark.parametrize(
    "operands, operator, expected",
    [
        ([1, 2, 3], "+", 6),
        ([1, 2, 3], "-", -4),
        ([1, 2, 3], "*", 6),
        ([7, 2, 9], "/", 7),
        ([4], "-", 4),
    ],
)
def test_calculate(operands, operator, expected):
    assert opcalc.calculate(operands, operator) == expected


def test_calculate_stays_in_int32_range():
    result = opcalc.calculate([2**30, 8, 3], "*")
    assert -(2**31) <= result < 2**31


def test_calculate_requires_operands():
    with pytest.raises(ValueError):
        opcalc.calculate([], "+")


def test_encode_request_layout():
    data = opcalc.encode_request([1, 2], "+")
    assert len(data) == 2 + 4 * 2
    assert data[0] == 2
    assert data[-1] == ord("+")
    assert data[1:5] == struct.pack("=i", 1)


@pytest.mark.parametrize(
    "operands, operator",
    [([5], "*"), ([1, -2, 3], "+"), ([2**31 - 1, -(2**31)], "-"), ([], "+")],
)
def test_encode_decode_round_trip(operands, operator):
    data = opcalc.encode_request(operands, operator)
    assert opcalc.decode_request(data) == (operands, operator)


@pytest.mark.parametrize(
    "operands, operator",
    [([1] * 256, "+"), ([2**31], "+"), ([1], "++")],
)
def test_encode_request_rejects_bad_input(operands, operator):
    with pytest.raises(ValueError):
        opcalc.encode_request(operands, operator)


@pytest.mark.parametrize(
    "data",
    [opcalc.encode_request([1, 2, 3], "*")[:-1], b"\x00"],
)
def test_decode_request_rejects_short_data(data):
    with pytest.raises(ValueError):
        opcalc.decode_request(data)


def test_read_request_from_socket(pair):
    a, b = pair
    a.sendall(opcalc.encode_request([10, 20], "-"))
    assert opcalc.read_request(b) == ([10, 20], "-")


def test_read_request_early_close(pair):
    a, b = pair
    a.sendall(opcalc.encode_request([10, 20], "-")[:4])
    a.close()
    with pytest.raises(ConnectionError):
        opcalc.read_request(b)


def test_handle_client_replies_with_result(pair, capsys):
    a, b = pair
    a.sendall(opcalc.encode_request([3, 4, 5], "*"))
    result = opcalc.handle_client(b)
    (reply,) = struct.unpack("=i", a.recv(4))
    assert result == opcalc.calculate([3, 4, 5], "*")
    assert reply == result
    assert f"result: {result}" in capsys.readouterr().out


def test_request_against_handler(pair):
    a, b = pair
    with ThreadPoolExecutor(1) as pool:
        future = pool.submit(opcalc.handle_client, b)
        result = opcalc.request(a, [9, 3, 2], "-")
        assert future.result(timeout=5) == result
    assert result == opcalc.calculate([9, 3, 2], "-")


def test_client_main_end_to_end(monkeypatch, capsys):
    server = open_server(0)
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n4 5\n6\n*\n"))

    def serve():
        conn, _ = server.accept()
        with conn:
            return opcalc.handle_client(conn)

    with server, ThreadPoolExecutor(1) as pool:
        future = pool.submit(serve)
        assert opcalc.client_main(["127.0.0.1", str(server.getsockname()[1])]) == 0
        served = future.result(timeout=5)
    out = capsys.readouterr().out
    assert served == opcalc.calculate([4, 5, 6], "*")
    assert f"Operation's result: {served}" in out
    assert "Operand count:" in out


@pytest.mark.parametrize(
    "main, args, stream, text",
    [
        (opcalc.client_main, ["127.0.0.1"], "out", "Usage"),
        (opcalc.server_main, [], "err", "Usage"),
        (opcalc.server_main, ["port"], "err", "invalid port"),
    ],
)
def test_main_reports_errors(capsys, main, args, stream, text):
    assert main(args) == 1
    assert text in getattr(capsys.readouterr(), stream)