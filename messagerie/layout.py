"""Geometry, colours and text placement of the client and server windows."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import NamedTuple, Sequence, Tuple

Color = Tuple[int, int, int]
Point = Tuple[float, float]

WINDOW_SIZE = (1920, 1080)
FRAMERATE = 60

BACKGROUND = (22, 35, 52)
BUTTON_COLOR = (56, 62, 71)
HOVER_COLOR = (39, 43, 46)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)


class Rect(NamedTuple):
    """An axis-aligned rectangle given by its corner and its size."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, pos: Sequence[float]) -> bool:
        """Whether ``pos`` lies inside; the left and top edges are inside,
        the right and bottom edges are not. Negative sizes are allowed."""
        px, py = pos
        left, right = sorted((self.x, self.x + self.width))
        top, bottom = sorted((self.y, self.y + self.height))
        return left <= px < right and top <= py < bottom


@dataclass(frozen=True)
class Label:
    """A piece of text, where it is drawn, its character size and colour."""

    text: str
    position: Point
    size: int
    color: Color = WHITE

    def with_text(self, text: str) -> "Label":
        """The same label showing ``text``."""
        return replace(self, text=text)


@dataclass(frozen=True)
class Panel:
    """A filled rectangle, optionally outlined."""

    rect: Rect
    color: Color
    outline_thickness: float = 0
    outline_color: Color = BLACK


@dataclass(frozen=True)
class Sprite:
    """A textured frame placed at ``position`` and stretched by ``scale``."""

    position: Point
    scale: Tuple[float, float]


@dataclass(frozen=True)
class Button:
    """A clickable rectangle with a caption that darkens under the mouse."""

    rect: Rect
    label: Label
    color: Color = BUTTON_COLOR
    hover_color: Color = HOVER_COLOR

    def __post_init__(self) -> None:
        if not isinstance(self.rect, Rect):
            if len(self.rect) != 4:
                raise ValueError("rect must have x, y, width and height")
            object.__setattr__(self, "rect", Rect(*self.rect))

    def contains(self, pos: Sequence[float]) -> bool:
        """Whether ``pos`` falls on the button."""
        return self.rect.contains(pos)

    def fill_color(self, mouse_pos: Sequence[float]) -> Color:
        """The colour to fill the button with while the mouse is at ``mouse_pos``."""
        return self.hover_color if self.contains(mouse_pos) else self.color


# Client window
CONNECT_BUTTON = Button(Rect(670, 730, 550, 195), Label("CONNECT", (690, 770), 100, WHITE))
IP_BOX = Panel(Rect(600, 300, 700, 120), WHITE)
IP_TEXT = Label("", (610, 300), 100, BLACK)
MESSAGES_BOX = Panel(Rect(200, 50, 1400, 1000), WHITE)
WRITE_BOX = Panel(Rect(250, 940, 1300, 80), WHITE, outline_thickness=1, outline_color=BLACK)
WRITE_TEXT = Label("", (260, 935), 40, BLACK)
MESSAGE_SIZE = 40
MESSAGE_COLOR = BLACK

# Server window
STATUS_FRAME = Sprite((20, 10), (3.3, 3))
IP_FRAME = Sprite((20, 150), (3.3, 3))
STATUS_LABEL = Label("STATUS : ", (50, 2), 100, WHITE)
OFFLINE_LABEL = Label("OFFLINE", (500, 2), 100, RED)
ONLINE_LABEL = Label("ONLINE", (500, 2), 100, GREEN)
PORT_LABEL = Label("PORT : 8080", (1200, 2), 100, WHITE)
IP_CAPTION = Label("IP : ", (50, 140), 100, WHITE)
IP_VALUE = Label("", (230, 140), 100, WHITE)
LAUNCH_BUTTON = Button(Rect(1420, 900, 400, 150), Label("LAUNCH", (1450, 927), 80, WHITE))
CLOSE_LABEL = Label("CLOSE", (1480, 927), 80, WHITE)


def server_ip_label(address: str) -> Label:
    """The label showing the server's own address."""
    return IP_VALUE.with_text(address)