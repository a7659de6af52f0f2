"""Editable one-line text fields for the address and the message."""

from __future__ import annotations

from dataclasses import dataclass

from .connection import BUFSIZ

_IP_CHARS = frozenset("0123456789.")


@dataclass
class TextField:
    """A line of text edited one character at a time."""

    text: str = ""
    max_length: int = BUFSIZ - 1

    def accepts(self, char: str) -> bool:
        """Whether ``char`` may be typed into this field."""
        return len(char) == 1

    def type_char(self, char: str) -> bool:
        """Append ``char`` if accepted and room is left; report whether it was."""
        if not self.accepts(char) or len(self.text) >= self.max_length:
            return False
        self.text += char
        return True

    def backspace(self) -> None:
        """Remove the last character, if any."""
        self.text = self.text[:-1]

    def clear(self) -> None:
        self.text = ""


class IpField(TextField):
    """Field for a dotted IPv4 address: digits and dots only."""

    def accepts(self, char: str) -> bool:
        return len(char) == 1 and char in _IP_CHARS


class MessageField(TextField):
    """Field for a chat message: printable ASCII only."""

    def accepts(self, char: str) -> bool:
        return len(char) == 1 and 32 <= ord(char) <= 126