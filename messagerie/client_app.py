"""The chat client window: enter the server's address, then chat."""

from __future__ import annotations

import argparse
import functools
import sys
from typing import List, Optional, Sequence, Tuple

import pygame

from .chat_log import MessageLog
from .connection import DEFAULT_PORT, ChatConnection
from .input_fields import IpField, MessageField
from .layout import (
    BACKGROUND,
    CONNECT_BUTTON,
    FRAMERATE,
    IP_BOX,
    IP_TEXT,
    MESSAGE_COLOR,
    MESSAGE_SIZE,
    MESSAGES_BOX,
    WINDOW_SIZE,
    WRITE_BOX,
    WRITE_TEXT,
    Color,
    Label,
    Panel,
    Rect,
)

EXIT_FAILURE = 84
EXIT_SUCCESS = 0


@functools.lru_cache(maxsize=None)
def _font(size: int) -> "pygame.font.Font":
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _to_pygame_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(round(rect.x), round(rect.y), round(rect.width), round(rect.height))


def _draw_label(surface: pygame.Surface, label: Label) -> None:
    if label.text:
        image = _font(label.size).render(label.text, True, label.color)
        surface.blit(image, label.position)


def _draw_panel(surface: pygame.Surface, panel: Panel) -> None:
    area = _to_pygame_rect(panel.rect)
    pygame.draw.rect(surface, panel.color, area)
    if panel.outline_thickness > 0:
        thickness = max(1, round(panel.outline_thickness))
        pygame.draw.rect(surface, panel.outline_color, area.inflate(2 * thickness, 2 * thickness), thickness)


class ClientApp:
    """State of the client window: the address menu first, then the chat view."""

    def __init__(self, connection: Optional[ChatConnection] = None) -> None:
        self.connection = connection if connection is not None else ChatConnection()
        self.ip_field = IpField()
        self.message_field = MessageField()
        self.log = MessageLog()
        self.connected = False
        self.connect_button = CONNECT_BUTTON
        self.mouse_pos: Tuple[float, float] = (-1.0, -1.0)

    @property
    def button_color(self) -> Color:
        """The connect button's colour for the current mouse position."""
        return self.connect_button.fill_color(self.mouse_pos)

    def handle_event(self, event: "pygame.event.Event") -> None:
        """React to one window event."""
        if event.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
            self.mouse_pos = tuple(event.pos)
        if event.type == pygame.MOUSEBUTTONDOWN:
            self._clicked(event.pos)
        field = self.message_field if self.connected else self.ip_field
        if event.type == pygame.TEXTINPUT:
            for char in event.text:
                field.type_char(char)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_BACKSPACE:
                field.backspace()
            elif self.connected and event.key == pygame.K_RETURN:
                self._send()

    def _clicked(self, pos: Sequence[float]) -> None:
        if self.connected or not self.connect_button.contains(pos):
            return
        try:
            self.connection.connect(self.ip_field.text)
        except (ValueError, OSError):
            return
        self.connected = True

    def _send(self) -> None:
        text = self.message_field.text
        self.log.push(text)
        try:
            self.connection.send(text)
        except (OSError, ValueError):
            pass
        self.message_field.clear()

    def update(self) -> List[str]:
        """Take in the messages that arrived; return them."""
        if not self.connected:
            return []
        try:
            received = self.connection.receive()
        except OSError:
            return []
        for text in received:
            self.log.push(text)
        return received

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current view onto ``surface``."""
        surface.fill(BACKGROUND)
        if not self.connected:
            pygame.draw.rect(surface, self.button_color, _to_pygame_rect(self.connect_button.rect))
            _draw_label(surface, self.connect_button.label)
            _draw_panel(surface, IP_BOX)
            _draw_label(surface, IP_TEXT.with_text(self.ip_field.text))
            return
        _draw_panel(surface, MESSAGES_BOX)
        _draw_panel(surface, WRITE_BOX)
        _draw_label(surface, WRITE_TEXT.with_text(self.message_field.text))
        for message in self.log:
            _draw_label(surface, Label(message.text, message.position, MESSAGE_SIZE, MESSAGE_COLOR))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the client window and run it until it is closed."""
    parser = argparse.ArgumentParser(prog="messagerie-client", description="Chat client window.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="server port")
    args = parser.parse_args(argv)

    try:
        connection = ChatConnection(port=args.port)
    except OSError as exc:
        print(f"cannot create socket: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    with connection:
        try:
            pygame.init()
            window = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        except pygame.error as exc:
            print(f"cannot open window: {exc}", file=sys.stderr)
            pygame.quit()
            return EXIT_FAILURE
        try:
            pygame.display.set_caption("CLIENT")
            pygame.key.start_text_input()
            clock = pygame.time.Clock()
            app = ClientApp(connection)
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    else:
                        app.handle_event(event)
                app.update()
                app.draw(window)
                pygame.display.flip()
                clock.tick(FRAMERATE)
        finally:
            pygame.quit()
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())