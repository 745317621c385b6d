"""A box with an optional border holding either text or a child element."""

from __future__ import annotations

from dataclasses import dataclass, field

from .border import Border
from .drawing import Color, Screen, Style, draw_box, draw_hline, draw_text, draw_vline
from .geometry import BaseElement, Element, Point, Size


@dataclass(eq=False)
class SizedBox(BaseElement):
    """A bordered box; ``size`` is its preferred size."""

    border: Border = field(default_factory=Border)
    content: str = ""
    text_color: Color = Color.DEFAULT
    child: Element | None = None
    size: Size = field(default_factory=Size)

    def name(self) -> str:
        return "SizedBox"

    def set_render_size(self, size: Size) -> None:
        super().set_render_size(size)
        if self.child is not None:
            border = self.border
            inset = Size(
                int(border.left) + int(border.right),
                int(border.top) + int(border.bottom),
            )
            self.child.set_render_size(size.subtract(inset))

    def preferred_size(self) -> Size:
        return self.size

    def render(self, screen: Screen, mount_point: Point) -> Size:
        size = self.render_size
        border = self.border
        x, y = mount_point.x, mount_point.y
        right = x + size.width - 1
        bottom = y + size.height - 1

        if border.is_full():
            far = Point(right, bottom)
            inner = mount_point.add_size(Size(1, 1))
            draw_box(screen, mount_point, far)
            if self.content:
                draw_text(screen, inner, far, self.content)
            elif self.child is not None:
                self.child.render(screen, inner)
            return size

        if border.top:
            draw_hline(screen, y, x, x + size.width - 2)
        if border.bottom:
            draw_hline(screen, bottom, x, x + size.width - 2)
        if border.left:
            draw_vline(screen, x, y, bottom)
        if border.right:
            draw_vline(screen, right, y, bottom)

        corners = (
            (x, y, border.top_left_corner()),
            (right, y, border.top_right_corner()),
            (x, bottom, border.bottom_left_corner()),
            (right, bottom, border.bottom_right_corner()),
        )
        for cx, cy, char in corners:
            if char:
                screen.set_content(cx, cy, char, Style())

        offset = Size(int(border.left), int(border.top))
        if self.content:
            far_offset = Size(size.width - offset.width, size.height - offset.height)
            draw_text(
                screen,
                mount_point.add_size(offset),
                mount_point.add_size(far_offset),
                self.content,
                self.text_color,
            )
        elif self.child is not None:
            self.child.render(screen, mount_point.add_size(offset))

        return size