"""Scrolling log of chat messages shown in the client window."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, Tuple

ORIGIN_X = 300.0
ORIGIN_Y = 800.0
LINE_SPACING = 50.0
MAX_MESSAGES = 16


@dataclass
class ChatMessage:
    """A message and the place where it is drawn."""

    text: str
    x: float = ORIGIN_X
    y: float = ORIGIN_Y

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


class MessageLog:
    """Messages in arrival order; the newest sits at the bottom line.

    Each new message pushes the older ones up by one line, and once the
    log holds more than ``max_messages`` the oldest one is dropped.
    """

    def __init__(self, max_messages: int = MAX_MESSAGES, spacing: float = LINE_SPACING) -> None:
        if max_messages < 1:
            raise ValueError("max_messages must be at least 1")
        self.max_messages = max_messages
        self.spacing = spacing
        self._messages: Deque[ChatMessage] = deque()

    def push(self, text: str) -> ChatMessage:
        """Add a message at the bottom line and scroll the others up."""
        for message in self._messages:
            message.y -= self.spacing
        message = ChatMessage(text)
        self._messages.append(message)
        if len(self._messages) > self.max_messages:
            self._messages.popleft()
        return message

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)