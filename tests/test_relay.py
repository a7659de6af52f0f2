import time

import pytest

from messagerie.connection import ChatConnection
from messagerie.relay import MAXLOG, RelayServer


def _pump(server, until, timeout=3.0):
    relayed = []
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        relayed.extend(server.poll())
        if until(relayed):
            return relayed
        time.sleep(0.01)
    return relayed


def _receive(server, conn, count, timeout=3.0):
    received = []
    deadline = time.monotonic() + timeout
    while len(received) < count and time.monotonic() < deadline:
        server.poll()
        received.extend(conn.receive())
        time.sleep(0.01)
    return received


def _connected(server, count):
    conns = []
    port = server.address[1]
    for _ in range(count):
        conn = ChatConnection(port)
        conn.connect("127.0.0.1")
        conns.append(conn)
    return conns


def test_default_capacity():
    assert RelayServer().max_clients == MAXLOG == 20


def test_invalid_capacity():
    with pytest.raises(ValueError):
        RelayServer(max_clients=0)


def test_poll_before_start():
    with pytest.raises(RuntimeError):
        RelayServer("127.0.0.1", 0).poll()


def test_start_twice():
    with RelayServer("127.0.0.1", 0) as server:
        with pytest.raises(RuntimeError):
            server.start()
    assert server.running is False


def test_message_goes_to_everyone_but_sender():
    with RelayServer("127.0.0.1", 0) as server:
        a, b, c = _connected(server, 3)
        try:
            _pump(server, lambda _: server.client_count == 3)
            assert server.client_count == 3
            a.send("hello")
            relayed = _pump(server, lambda r: r == ["hello"])
            assert relayed == ["hello"]
            assert _receive(server, b, 1) == ["hello"]
            assert _receive(server, c, 1) == ["hello"]
            assert a.receive() == []
        finally:
            for conn in (a, b, c):
                conn.close()


def test_disconnected_client_is_removed():
    with RelayServer("127.0.0.1", 0) as server:
        (a,) = _connected(server, 1)
        _pump(server, lambda _: server.client_count == 1)
        assert server.client_count == 1
        a.close()
        _pump(server, lambda _: server.client_count == 0)
        assert server.client_count == 0


def test_client_beyond_capacity_is_refused():
    with RelayServer("127.0.0.1", 0, 1) as server:
        first, second = _connected(server, 2)
        try:
            deadline = time.monotonic() + 3.0
            while not second.peer_closed and time.monotonic() < deadline:
                server.poll()
                second.receive()
                time.sleep(0.01)
            assert second.peer_closed is True
            assert server.client_count == 1
            assert first.peer_closed is False
        finally:
            first.close()
            second.close()


def test_close_disconnects_clients():
    server = RelayServer("127.0.0.1", 0)
    server.start()
    (a,) = _connected(server, 1)
    try:
        _pump(server, lambda _: server.client_count == 1)
        server.close()
        assert server.client_count == 0
        deadline = time.monotonic() + 3.0
        while not a.peer_closed and time.monotonic() < deadline:
            a.receive()
            time.sleep(0.01)
        assert a.peer_closed is True
    finally:
        a.close()