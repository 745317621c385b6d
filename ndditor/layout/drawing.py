"""Colours, styles, the screen interface and primitive drawing routines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from .border import H_LINE, LL_CORNER, LR_CORNER, UL_CORNER, UR_CORNER, V_LINE
from .geometry import Point


class Color(Enum):
    """Foreground colours understood by screens."""

    DEFAULT = "default"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


@dataclass(frozen=True)
class Style:
    """How a cell is drawn."""

    foreground: Color = Color.DEFAULT
    reverse: bool = False


class Screen(Protocol):
    """A cell-addressed terminal surface."""

    def set_content(self, x: int, y: int, char: str, style: Style) -> None: ...

    def show_cursor(self, x: int, y: int) -> None: ...

    def hide_cursor(self) -> None: ...

    def clear(self) -> None: ...

    def size(self) -> tuple[int, int]: ...

    def show(self) -> None: ...

    def sync(self) -> None: ...

    def poll_event(self) -> object: ...


def _style_for(color: Color | None) -> Style:
    return Style() if color is None else Style(foreground=color)


def draw_text(
    screen: Screen, p1: Point, p2: Point, content: str, color: Color | None = None
) -> None:
    """Draw text from ``p1`` wrapping before column ``p2.x`` and stopping past row ``p2.y``."""
    style = _style_for(color)
    row, col = p1.y, p1.x
    for char in content:
        screen.set_content(col, row, char, style)
        col += 1
        if col >= p2.x:
            row += 1
            col = p1.x
        if row > p2.y:
            break


def draw_box(screen: Screen, p1: Point, p2: Point) -> None:
    """Draw a filled box with a line border between two opposite corners."""
    style = Style()
    x1, x2 = sorted((p1.x, p2.x))
    y1, y2 = sorted((p1.y, p2.y))

    for row in range(y1, y2 + 1):
        for col in range(x1, x2 + 1):
            screen.set_content(col, row, " ", style)

    for col in range(x1, x2 + 1):
        screen.set_content(col, y1, H_LINE, style)
        screen.set_content(col, y2, H_LINE, style)
    for row in range(y1 + 1, y2):
        screen.set_content(x1, row, V_LINE, style)
        screen.set_content(x2, row, V_LINE, style)

    if y1 != y2 and x1 != x2:
        screen.set_content(x1, y1, UL_CORNER, style)
        screen.set_content(x2, y1, UR_CORNER, style)
        screen.set_content(x1, y2, LL_CORNER, style)
        screen.set_content(x2, y2, LR_CORNER, style)


def draw_vline(screen: Screen, x: int, y1: int, y2: int) -> None:
    """Draw a vertical line in column ``x`` from ``y1`` to ``y2`` inclusive."""
    style = Style()
    for row in range(y1, y2 + 1):
        screen.set_content(x, row, V_LINE, style)


def draw_hline(
    screen: Screen, y: int, x1: int, x2: int, color: Color | None = None
) -> None:
    """Draw a horizontal line in row ``y`` from ``x1`` to ``x2`` inclusive."""
    style = _style_for(color)
    for col in range(x1, x2 + 1):
        screen.set_content(col, y, H_LINE, style)