"""Client side of the chat protocol: fixed-size, NUL-padded frames over TCP."""

from __future__ import annotations

import errno
import os
import socket
from typing import List, Optional

BUFSIZ = 8192
DEFAULT_PORT = 8080
SEND_TIMEOUT = 1.0

_IN_PROGRESS = {0, errno.EINPROGRESS, errno.EWOULDBLOCK, errno.EALREADY, errno.EISCONN}


def encode_message(text: str) -> bytes:
    """Encode ``text`` as one frame of exactly BUFSIZ bytes, NUL padded."""
    data = text.encode("utf-8")
    if b"\0" in data:
        raise ValueError("message must not contain NUL characters")
    if len(data) >= BUFSIZ:
        raise ValueError(f"message must be shorter than {BUFSIZ} bytes")
    return data.ljust(BUFSIZ, b"\0")


def decode_message(data: bytes) -> str:
    """Decode a frame: the text up to the first NUL byte."""
    return bytes(data).split(b"\0", 1)[0].decode("utf-8", errors="replace")


class ChatConnection:
    """A non-blocking TCP connection to a relay server."""

    def __init__(self, port: int = DEFAULT_PORT) -> None:
        self.port = port
        self.send_timeout = SEND_TIMEOUT
        self.address: Optional[str] = None
        self.peer_closed = False
        self._pending = bytearray()
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._sock.setblocking(False)

    def connect(self, address: str) -> None:
        """Start connecting to ``address``, a dotted IPv4 address."""
        try:
            socket.inet_pton(socket.AF_INET, address)
        except OSError as exc:
            raise ValueError(f"invalid IPv4 address: {address!r}") from exc
        result = self._sock.connect_ex((address, self.port))
        if result not in _IN_PROGRESS:
            raise ConnectionError(result, os.strerror(result))
        self.address = address

    def send(self, text: str) -> None:
        """Send ``text`` as one frame."""
        frame = encode_message(text)
        self._sock.settimeout(self.send_timeout)
        try:
            self._sock.sendall(frame)
        finally:
            self._sock.setblocking(False)

    def receive(self) -> List[str]:
        """Return the non-empty messages of every complete frame received so far."""
        while not self.peer_closed:
            try:
                chunk = self._sock.recv(BUFSIZ)
            except (BlockingIOError, InterruptedError):
                break
            except ConnectionError:
                self.peer_closed = True
                break
            except OSError as exc:
                if exc.errno == errno.ENOTCONN:
                    break
                raise
            if not chunk:
                self.peer_closed = True
                break
            self._pending += chunk
        messages = []
        while len(self._pending) >= BUFSIZ:
            frame = bytes(self._pending[:BUFSIZ])
            del self._pending[:BUFSIZ]
            text = decode_message(frame)
            if text:
                messages.append(text)
        return messages

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> "ChatConnection":
        return self

    def __exit__(self, *args) -> None:
        self.close()