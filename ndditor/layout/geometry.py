"""Basic geometry types and the shared base for layout elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class Size:
    """A width and height in terminal cells."""

    width: int = 0
    height: int = 0

    def __str__(self) -> str:
        return f"Size({self.width}, {self.height})"

    def subtract(self, other: Size) -> Size:
        """Return this size reduced by ``other`` in both dimensions."""
        return Size(self.width - other.width, self.height - other.height)


@dataclass(frozen=True)
class Point:
    """A cell position on the screen."""

    x: int = 0
    y: int = 0

    def __str__(self) -> str:
        return f"Point({self.x}, {self.y})"

    def add_size(self, size: Size) -> Point:
        """Return the point moved right by the width and down by the height."""
        return Point(self.x + size.width, self.y + size.height)


class Element(Protocol):
    """Anything that can be laid out and drawn."""

    def name(self) -> str: ...

    def preferred_size(self) -> Size: ...

    def set_render_size(self, size: Size) -> None: ...

    def render(self, screen, mount_point: Point) -> Size: ...


@dataclass(eq=False)
class BaseElement:
    """Render size and focus state shared by concrete elements."""

    render_size: Size = field(default_factory=Size, init=False)
    is_focused: bool = field(default=False, init=False)

    def set_render_size(self, size: Size) -> None:
        self.render_size = size

    def focus(self) -> None:
        self.is_focused = True

    def blur(self) -> None:
        self.is_focused = False