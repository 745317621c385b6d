"""Column and row containers that share out space among their children."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .drawing import Screen
from .geometry import Element, Point, Size


def _distribute(sizes: list[Size], flexible: list[int], remaining: int, axis: str) -> None:
    """Give ``remaining`` space to the flexible entries; the last takes the rest."""
    if remaining <= 0 or not flexible:
        return
    share = remaining // len(flexible)
    *leading, last = flexible
    for index in leading:
        sizes[index] = replace(sizes[index], **{axis: share})
        remaining -= share
    sizes[last] = replace(sizes[last], **{axis: remaining})


@dataclass(eq=False)
class Column:
    """Stacks children vertically."""

    children: list[Element] = field(default_factory=list)

    def name(self) -> str:
        return "Column"

    def set_render_size(self, size: Size) -> None:
        sizes: list[Size] = []
        flexible: list[int] = []
        remaining = size.height
        for index, child in enumerate(self.children):
            child_size = child.preferred_size()
            if child_size.height == 0:
                flexible.append(index)
            else:
                remaining -= child_size.height
            if child_size.width == 0:
                child_size = replace(child_size, width=size.width)
            sizes.append(child_size)

        _distribute(sizes, flexible, remaining, "height")

        for child, child_size in zip(self.children, sizes):
            child.set_render_size(child_size)

    def preferred_size(self) -> Size:
        width = 0
        height = 0
        unknown_height = False
        for child in self.children:
            child_size = child.preferred_size()
            if child_size.height == 0:
                unknown_height = True
            width = max(width, child_size.width)
            height += child_size.height
        return Size(width, 0 if unknown_height else height)

    def render(self, screen: Screen, mount_point: Point) -> Size:
        width = 0
        height = 0
        for child in self.children:
            child_size = child.render(screen, mount_point)
            width = max(width, child_size.width)
            height += child_size.height
            mount_point = Point(mount_point.x, mount_point.y + height)
        return Size(width, height)


@dataclass(eq=False)
class Row:
    """Places children side by side."""

    children: list[Element] = field(default_factory=list)

    def name(self) -> str:
        return "Row"

    def set_render_size(self, size: Size) -> None:
        sizes: list[Size] = []
        flexible: list[int] = []
        remaining = size.width
        for index, child in enumerate(self.children):
            child_size = child.preferred_size()
            if child_size.width == 0:
                flexible.append(index)
            else:
                remaining -= child_size.width
            if child_size.height == 0:
                child_size = replace(child_size, height=size.height)
            sizes.append(child_size)

        _distribute(sizes, flexible, remaining, "width")

        for child, child_size in zip(self.children, sizes):
            child.set_render_size(child_size)

    def preferred_size(self) -> Size:
        """Sum of preferred widths and the largest preferred height."""
        width = 0
        height = 0
        unknown_width = False
        for child in self.children:
            child_size = child.preferred_size()
            if child_size.width == 0:
                unknown_width = True
            height = max(height, child_size.height)
            width += child_size.width
        return Size(0 if unknown_width else width, height)

    def render(self, screen: Screen, mount_point: Point) -> Size:
        width = 0
        height = 0
        for child in self.children:
            child_size = child.render(screen, mount_point)
            height = max(height, child_size.height)
            width += child_size.width
            mount_point = Point(mount_point.x + child_size.width, mount_point.y)
        return Size(width, height)