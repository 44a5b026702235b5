import socket
import threading
import time

from latencykit.echo_server import EchoServer, main


def _poll_until(server, condition, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        server.poll_once()
        if condition():
            return True
        time.sleep(0.005)
    return False


def test_address_reports_bound_port():
    with EchoServer("127.0.0.1", 0) as server:
        host, port = server.address()
        assert host == "127.0.0.1"
        assert port > 0


def test_poll_once_echoes_data():
    with EchoServer("127.0.0.1", 0) as server:
        with socket.create_connection(server.address(), timeout=5) as client:
            client.sendall(b"ping")
            total = 0
            deadline = time.monotonic() + 5
            while total < 4 and time.monotonic() < deadline:
                total += server.poll_once()
                time.sleep(0.005)
            assert total == len(b"ping")
            assert client.recv(64) == b"ping"


def test_client_count_follows_connect_and_disconnect():
    with EchoServer("127.0.0.1", 0) as server:
        assert server.client_count == 0
        client = socket.create_connection(server.address(), timeout=5)
        assert _poll_until(server, lambda: server.client_count == 1)
        client.close()
        assert _poll_until(server, lambda: server.client_count == 0)


def test_on_connect_receives_accepted_socket():
    peers = []
    with EchoServer("127.0.0.1", 0, on_connect=lambda c: peers.append(c.getpeername())) as server:
        with socket.create_connection(server.address(), timeout=5) as client:
            assert _poll_until(server, lambda: bool(peers))
            assert peers == [client.getsockname()]


def test_serve_runs_until_client_leaves():
    with EchoServer("127.0.0.1", 0) as server:
        client = socket.create_connection(server.address(), timeout=5)
        client.sendall(b"hello")
        result = []
        worker = threading.Thread(target=lambda: result.append(server.serve(0.0)), daemon=True)
        worker.start()
        try:
            assert client.recv(64) == b"hello"
        finally:
            client.close()
        worker.join(5)
        assert not worker.is_alive()
        assert result[0] >= 1


def test_serve_returns_when_idle():
    with EchoServer("127.0.0.1", 0) as server:
        start = time.monotonic()
        iterations = server.serve(0.05)
        assert time.monotonic() - start >= 0.05
        assert iterations >= 1


def test_main_reports_benchmark(capsys):
    assert main(["--host", "127.0.0.1", "--port", "0", "--duration", "0"]) == 0
    out = capsys.readouterr().out
    assert "Echo server on :" in out
    assert "Benchmark:" in out