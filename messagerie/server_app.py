"""The server window: shows the address and toggles relaying on and off."""

from __future__ import annotations

import argparse
import functools
import sys
from typing import List, Optional, Sequence, Tuple

import pygame

from .connection import DEFAULT_PORT
from .layout import (
    BACKGROUND,
    BUTTON_COLOR,
    CLOSE_LABEL,
    FRAMERATE,
    IP_CAPTION,
    IP_FRAME,
    LAUNCH_BUTTON,
    OFFLINE_LABEL,
    ONLINE_LABEL,
    PORT_LABEL,
    STATUS_FRAME,
    STATUS_LABEL,
    WINDOW_SIZE,
    Color,
    Label,
    Rect,
    Sprite,
    server_ip_label,
)
from .network import local_ipv4
from .relay import RelayServer

EXIT_FAILURE = 84
EXIT_SUCCESS = 0

_FRAME_SIZE = (560, 45)
_FRAME_BORDER = 3


@functools.lru_cache(maxsize=None)
def _font(size: int) -> "pygame.font.Font":
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _to_pygame_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(round(rect.x), round(rect.y), round(rect.width), round(rect.height))


def _draw_label(surface: pygame.Surface, label: Label) -> None:
    if label.text:
        surface.blit(_font(label.size).render(label.text, True, label.color), label.position)


def _draw_frame(surface: pygame.Surface, sprite: Sprite) -> None:
    width = _FRAME_SIZE[0] * sprite.scale[0]
    height = _FRAME_SIZE[1] * sprite.scale[1]
    area = _to_pygame_rect(Rect(sprite.position[0], sprite.position[1], width, height))
    pygame.draw.rect(surface, BUTTON_COLOR, area, _FRAME_BORDER)


class ServerApp:
    """State of the server window around a relay server."""

    def __init__(self, server: RelayServer, address: str) -> None:
        self.server = server
        self.address = address
        self.launched = False
        self.mouse_pos: Tuple[float, float] = (-1.0, -1.0)
        if not server.running:
            server.start()

    @property
    def button_color(self) -> Color:
        return LAUNCH_BUTTON.fill_color(self.mouse_pos)

    @property
    def status_label(self) -> Label:
        return ONLINE_LABEL if self.launched else OFFLINE_LABEL

    @property
    def button_label(self) -> Label:
        return CLOSE_LABEL if self.launched else LAUNCH_BUTTON.label

    @property
    def port_label(self) -> Label:
        return PORT_LABEL.with_text(f"PORT : {self.server.address[1]}")

    def handle_event(self, event: "pygame.event.Event") -> None:
        """React to one window event."""
        if event.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
            self.mouse_pos = tuple(event.pos)
        if event.type == pygame.MOUSEBUTTONDOWN and LAUNCH_BUTTON.contains(event.pos):
            self.launched = not self.launched

    def update(self) -> List[str]:
        """Serve clients while launched; return the messages relayed."""
        if not self.launched:
            return []
        try:
            return self.server.poll()
        except OSError:
            return []

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the status panel and the launch button onto ``surface``."""
        surface.fill(BACKGROUND)
        _draw_frame(surface, STATUS_FRAME)
        _draw_frame(surface, IP_FRAME)
        _draw_label(surface, STATUS_LABEL)
        _draw_label(surface, self.port_label)
        _draw_label(surface, IP_CAPTION)
        _draw_label(surface, server_ip_label(self.address))
        _draw_label(surface, self.status_label)
        pygame.draw.rect(surface, self.button_color, _to_pygame_rect(LAUNCH_BUTTON.rect))
        _draw_label(surface, self.button_label)

    def close(self) -> None:
        """Stop the server and drop its clients."""
        self.server.close()

    def __enter__(self) -> "ServerApp":
        return self

    def __exit__(self, *args) -> None:
        self.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start listening, open the server window and run it until it is closed."""
    parser = argparse.ArgumentParser(prog="messagerie-server", description="Chat relay server window.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    address = local_ipv4() or ""
    print(address)
    try:
        app = ServerApp(RelayServer(port=args.port), address)
    except OSError as exc:
        print(f"cannot start server: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    with app:
        try:
            pygame.init()
            window = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        except pygame.error as exc:
            print(f"cannot open window: {exc}", file=sys.stderr)
            pygame.quit()
            return EXIT_FAILURE
        try:
            pygame.display.set_caption("SERVER")
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    else:
                        app.handle_event(event)
                app.draw(window)
                app.update()
                pygame.display.flip()
                clock.tick(FRAMERATE)
        finally:
            pygame.quit()
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())