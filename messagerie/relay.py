"""The chat server: accepts clients and relays each message to the others."""

from __future__ import annotations

import select
import socket
from typing import Dict, List, Optional, Tuple

from .connection import BUFSIZ, DEFAULT_PORT, decode_message

MAXLOG = 20
SEND_TIMEOUT = 1.0


class RelayServer:
    """A polled TCP server relaying fixed-size frames between its clients."""

    def __init__(self, host: str = "", port: int = DEFAULT_PORT, max_clients: int = MAXLOG) -> None:
        if max_clients < 1:
            raise ValueError("max_clients must be at least 1")
        self.host = host
        self.port = port
        self.max_clients = max_clients
        self._listener: Optional[socket.socket] = None
        self._slots: List[Optional[socket.socket]] = [None] * max_clients
        self._buffers: Dict[int, bytearray] = {}

    @property
    def running(self) -> bool:
        return self._listener is not None

    @property
    def address(self) -> Tuple[str, int]:
        if self._listener is None:
            raise RuntimeError("server is not started")
        return self._listener.getsockname()

    @property
    def client_count(self) -> int:
        return sum(client is not None for client in self._slots)

    def start(self) -> None:
        """Bind and listen on the configured address."""
        if self._listener is not None:
            raise RuntimeError("server is already started")
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.setblocking(False)
            sock.bind((self.host, self.port))
            sock.listen(self.max_clients)
        except OSError:
            sock.close()
            raise
        self._listener = sock

    def poll(self) -> List[str]:
        """Handle whatever is ready without waiting; return the messages relayed."""
        if self._listener is None:
            raise RuntimeError("server is not started")
        watched = [self._listener, *(c for c in self._slots if c is not None)]
        readable, _, _ = select.select(watched, [], [], 0)
        ready = set(readable)
        if self._listener in ready:
            self._accept()
        relayed: List[str] = []
        for index, client in enumerate(self._slots):
            if client is not None and client in ready:
                relayed.extend(self._read(index))
        return relayed

    def _accept(self) -> None:
        try:
            conn, _ = self._listener.accept()
        except (BlockingIOError, InterruptedError, ConnectionAbortedError):
            return
        try:
            index = self._slots.index(None)
        except ValueError:
            conn.close()
            return
        conn.settimeout(SEND_TIMEOUT)
        self._slots[index] = conn
        self._buffers[index] = bytearray()

    def _read(self, index: int) -> List[str]:
        client = self._slots[index]
        try:
            chunk = client.recv(BUFSIZ)
        except OSError:
            chunk = b""
        if not chunk:
            self._remove(index)
            return []
        buffer = self._buffers[index]
        buffer += chunk
        relayed = []
        while len(buffer) >= BUFSIZ:
            frame = bytes(buffer[:BUFSIZ])
            del buffer[:BUFSIZ]
            self._broadcast(frame, index)
            relayed.append(decode_message(frame))
        return relayed

    def _broadcast(self, frame: bytes, sender: int) -> None:
        for index, client in enumerate(self._slots):
            if client is None or index == sender:
                continue
            try:
                client.sendall(frame)
            except OSError:
                pass

    def _remove(self, index: int) -> None:
        client = self._slots[index]
        if client is not None:
            client.close()
        self._slots[index] = None
        self._buffers.pop(index, None)

    def close(self) -> None:
        """Disconnect every client and stop listening."""
        for index in range(self.max_clients):
            self._remove(index)
        if self._listener is not None:
            self._listener.close()
            self._listener = None

    def __enter__(self) -> "RelayServer":
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.close()