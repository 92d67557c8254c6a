"""A Unix-socket server that sums the integers each client sends."""

from __future__ import annotations

import argparse
import os
import selectors
import socket
import struct
import threading
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

DEFAULT_SOCKET_PATH = "/tmp/DemoSock1"
REPLY_SIZE = 128
MAX_CLIENTS = 32
BACKLOG = 20

_NUMBER = struct.Struct("=i")


def encode_number(value: int) -> bytes:
    """Return ``value`` as a four-byte signed integer in host byte order."""
    try:
        return _NUMBER.pack(value)
    except struct.error as exc:
        raise OverflowError(f"{value} does not fit in a 32-bit integer") from exc


def decode_number(data: bytes) -> int:
    """Return the integer held in the first four bytes of ``data``."""
    raw = bytes(data)
    if len(raw) < _NUMBER.size:
        raise ValueError("need four bytes to decode a number")
    (value,) = _NUMBER.unpack(raw[: _NUMBER.size])
    return value


def _reply(total: int) -> bytes:
    return f"result : {total}\n".encode().ljust(REPLY_SIZE, b"\0")


@dataclass
class _Client:
    pending: bytearray = field(default_factory=bytearray)
    total: int = 0


class SumServer:
    """Listens on a Unix stream socket and serves many clients at once.

    Each client sends four-byte integers. A zero ends the session: the server
    replies ``result : <sum>`` padded with NUL bytes and closes the connection.
    """

    def __init__(
        self,
        path: str | os.PathLike[str] = DEFAULT_SOCKET_PATH,
        *,
        backlog: int = BACKLOG,
        max_clients: int = MAX_CLIENTS,
    ) -> None:
        self.path = os.fspath(path)
        self.max_clients = max_clients
        self._stop = threading.Event()
        self._closed = False
        self._listener = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            self._listener.bind(self.path)
            self._listener.listen(backlog)
        except OSError:
            self._listener.close()
            raise
        self._wake_r, self._wake_w = socket.socketpair()
        self._wake_r.setblocking(False)

    def __enter__(self) -> SumServer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()
        self.close()

    def serve_forever(self) -> None:
        """Accept and serve clients until :meth:`shutdown` is called."""
        selector = selectors.DefaultSelector()
        selector.register(self._listener, selectors.EVENT_READ, None)
        selector.register(self._wake_r, selectors.EVENT_READ, "wake")
        clients: dict[socket.socket, _Client] = {}
        try:
            while not self._stop.is_set():
                for key, _ in selector.select():
                    if key.fileobj is self._listener:
                        self._accept(selector, clients)
                    elif key.data == "wake":
                        self._drain_wake()
                    else:
                        self._service(selector, clients, key.fileobj)
        finally:
            for conn in clients:
                conn.close()
            selector.close()
            self.close()

    def shutdown(self) -> None:
        """Ask a running :meth:`serve_forever` to return."""
        self._stop.set()
        try:
            self._wake_w.send(b"x")
        except OSError:
            pass

    def close(self) -> None:
        """Close the listening socket and remove its file."""
        if self._closed:
            return
        self._closed = True
        self._listener.close()
        self._wake_r.close()
        self._wake_w.close()
        try:
            os.unlink(self.path)
        except FileNotFoundError:
            pass

    def _drain_wake(self) -> None:
        try:
            while self._wake_r.recv(64):
                pass
        except BlockingIOError:
            pass

    def _accept(self, selector: selectors.BaseSelector, clients: dict[socket.socket, _Client]) -> None:
        conn, _ = self._listener.accept()
        if len(clients) + 1 >= self.max_clients:
            conn.close()
            return
        clients[conn] = _Client()
        selector.register(conn, selectors.EVENT_READ, "client")

    def _drop(self, selector: selectors.BaseSelector, clients: dict[socket.socket, _Client], conn) -> None:
        selector.unregister(conn)
        clients.pop(conn, None)
        conn.close()

    def _service(self, selector: selectors.BaseSelector, clients: dict[socket.socket, _Client], conn) -> None:
        client = clients[conn]
        try:
            data = conn.recv(4096)
        except OSError:
            data = b""
        if not data:
            self._drop(selector, clients, conn)
            return
        client.pending += data
        while len(client.pending) >= _NUMBER.size:
            value = decode_number(client.pending)
            del client.pending[: _NUMBER.size]
            if value == 0:
                try:
                    conn.sendall(_reply(client.total))
                finally:
                    self._drop(selector, clients, conn)
                return
            client.total += value


def _numbers_to_send(numbers: Iterable[int]) -> list[int]:
    sent = []
    for number in numbers:
        sent.append(number)
        if number == 0:
            return sent
    sent.append(0)
    return sent


def send_numbers(path: str | os.PathLike[str], numbers: Iterable[int]) -> int:
    """Send ``numbers`` to the server at ``path`` and return the sum it reports.

    Sending stops at the first zero; a zero is added if there is none.
    """
    payload = b"".join(encode_number(n) for n in _numbers_to_send(numbers))
    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
        sock.connect(os.fspath(path))
        sock.sendall(payload)
        chunks = []
        while chunk := sock.recv(REPLY_SIZE):
            chunks.append(chunk)
    text = b"".join(chunks).rstrip(b"\0").decode().strip()
    if not text:
        raise ConnectionError("server closed the connection without a result")
    try:
        return int(text.split()[-1])
    except ValueError:
        raise ConnectionError(f"unexpected reply from server: {text!r}") from None


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="embedkit-sum", description="Sum integers over a Unix socket.")
    commands = parser.add_subparsers(dest="command", required=True)
    serve = commands.add_parser("serve", help="run the summing server")
    serve.add_argument("--path", default=DEFAULT_SOCKET_PATH)
    send = commands.add_parser("send", help="send numbers and print their sum")
    send.add_argument("--path", default=DEFAULT_SOCKET_PATH)
    send.add_argument("numbers", nargs="+", type=int)
    args = parser.parse_args(argv)

    if args.command == "serve":
        server = SumServer(args.path)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            server.close()
        return 0

    print(f"result : {send_numbers(args.path, args.numbers)}")
    return 0