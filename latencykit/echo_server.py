"""A single-threaded TCP echo server built on nonblocking sockets."""

from __future__ import annotations

import argparse
import contextlib
import socket
import time
from collections.abc import Callable


class EchoServer:
    """Accepts clients and echoes back whatever each one sends.

    Everything runs from :meth:`poll_once`, which never blocks.
    """

    def __init__(
        self,
        host: str = "0.0.0.0",
        port: int = 8888,
        *,
        backlog: int = 128,
        buffer_size: int = 1024,
        on_connect: Callable[[socket.socket], object] | None = None,
    ) -> None:
        self._listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self._listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._listener.bind((host, port))
            self._listener.listen(backlog)
            self._listener.setblocking(False)
        except OSError:
            self._listener.close()
            raise
        self._buffer_size = buffer_size
        self._on_connect = on_connect
        self._clients: list[socket.socket] = []

    def address(self) -> tuple[str, int]:
        """Return the ``(host, port)`` the server is bound to."""
        host, port = self._listener.getsockname()[:2]
        return host, port

    @property
    def client_count(self) -> int:
        return len(self._clients)

    def poll_once(self) -> int:
        """Accept a pending client, echo what clients sent, drop closed ones.

        Returns the number of bytes echoed. Accept failures other than
        "nothing pending" propagate as ``OSError``.
        """
        self._accept_pending()
        echoed = 0
        alive: list[socket.socket] = []
        for client in self._clients:
            try:
                data = client.recv(self._buffer_size)
            except BlockingIOError:
                alive.append(client)
                continue
            except OSError:
                client.close()
                continue
            if not data:
                client.close()
                continue
            with contextlib.suppress(BlockingIOError):
                echoed += client.send(data)
            alive.append(client)
        self._clients = alive
        return echoed

    def serve(self, idle_duration: float = 0.1) -> int:
        """Poll until no clients remain and ``idle_duration`` seconds have passed.

        Returns the number of loop iterations.
        """
        start = time.monotonic()
        iterations = 0
        while True:
            self.poll_once()
            iterations += 1
            if not self._clients and time.monotonic() - start >= idle_duration:
                return iterations

    def close(self) -> None:
        """Close every client and the listening socket."""
        for client in self._clients:
            client.close()
        self._clients = []
        self._listener.close()

    def __enter__(self) -> EchoServer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _accept_pending(self) -> None:
        try:
            conn, _ = self._listener.accept()
        except BlockingIOError:
            return
        conn.setblocking(False)
        self._clients.append(conn)
        if self._on_connect is not None:
            self._on_connect(conn)


def main(argv: list[str] | None = None) -> int:
    """Run the echo server until it has been idle for the given duration."""
    parser = argparse.ArgumentParser(description="Nonblocking TCP echo server.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8888)
    parser.add_argument(
        "--duration", type=float, default=0.1, help="idle seconds before exiting"
    )
    args = parser.parse_args(argv)

    def announce(conn: socket.socket) -> None:
        print(f"client connected, fd={conn.fileno()}")

    try:
        server = EchoServer(args.host, args.port, on_connect=announce)
    except OSError as exc:
        print(f"bind failed: {exc}")
        return 1
    with server:
        port = server.address()[1]
        print(f"Echo server on :{port} (nonblocking). Connect and send text.")
        start = time.monotonic()
        iterations = server.serve(args.duration)
        elapsed = max(time.monotonic() - start, 1e-9)
    print(
        f"Benchmark: {iterations} empty loop iters in {elapsed * 1000:.0f} ms "
        f"= {iterations / elapsed:.0f} iter/sec"
    )
    return 0