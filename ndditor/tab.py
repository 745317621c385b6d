"""A single editable document: its lines, cursor and file path."""

from __future__ import annotations

import os
import stat

from .layout.drawing import Screen, Style
from .layout.geometry import BaseElement, Point, Size
from .line import Line


def _base_name(path: str) -> str:
    """Last element of a slash-separated path, ignoring trailing slashes."""
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


class Tab(BaseElement):
    """The lines of one document together with the cursor inside it.

    ``cursor_x`` and ``cursor_y`` are the cursor's position in the visible
    area; ``line_index`` is the index of the line the cursor is on.
    """

    def __init__(self, title: str = "", *lines: Line) -> None:
        super().__init__()
        if lines:
            lines[0].move_cursor_to(0)
        self.lines: list[Line] = list(lines) or [Line.empty(64)]
        self.title = title
        self.path = ""
        self.cursor_x = 0
        self.cursor_y = 0
        self.line_index = 0

    @classmethod
    def from_path(cls, file_path: str) -> Tab:
        """Open ``file_path``; a missing file gives an empty tab saved there."""
        try:
            info = os.stat(file_path)
        except FileNotFoundError:
            tab = cls(_base_name(file_path), Line.empty(64))
            tab.set_path(file_path)
            return tab

        if stat.S_ISDIR(info.st_mode):
            raise IsADirectoryError(f"{file_path} is not a file")

        with open(file_path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()

        parts = text.split("\n")
        if parts[-1] == "":
            parts.pop()
        lines = [Line.from_text(part[:-1] if part.endswith("\r") else part) for part in parts]

        tab = cls("", *lines)
        tab.set_path(file_path)
        return tab

    @property
    def cursor_pos(self) -> Point:
        """The cursor position within the visible area."""
        return Point(self.cursor_x, self.cursor_y)

    def set_path(self, path: str) -> None:
        """Set where the tab is saved; the title becomes the file name."""
        self.path = path
        self.title = _base_name(path)

    def insert_newline(self) -> None:
        """Split the current line at the cursor and move to the new line."""
        height = self.render_size.height
        line = self.lines[self.line_index]
        self.line_index += 1
        self.cursor_y += 1
        if self.cursor_y >= height:
            self.cursor_y = height - 1
        rest = line.cut_after_cursor()
        new_line = Line.from_text(rest, cursor_at_start=True) if rest else Line.empty(64)
        self.lines.insert(self.line_index, new_line)
        self.cursor_x = 0

    def insert_rune(self, char: str) -> None:
        self.lines[self.line_index].insert(char)
        self.cursor_x += 1

    def backspace(self) -> None:
        """Delete before the cursor, joining with the line above at column 0."""
        if self.cursor_x > 0:
            self.lines[self.line_index].delete_before_cursor()
            self.cursor_x -= 1
        elif self.line_index > 0:
            above = self.lines[self.line_index - 1]
            self.cursor_x = len(above)
            above.append(self.lines[self.line_index])
            above.move_cursor_to(self.cursor_x)
            del self.lines[self.line_index]
            self.line_index -= 1
            self.cursor_y = max(self.cursor_y - 1, 0)

    def delete(self) -> None:
        """Delete after the cursor, joining with the next line at line end."""
        line = self.lines[self.line_index]
        if self.cursor_x < len(line):
            line.delete_after_cursor()
        elif self.line_index < len(self.lines) - 1:
            line.append(self.lines[self.line_index + 1])
            del self.lines[self.line_index + 1]

    def move_cursor(self, dx: int, dy: int) -> None:
        """Move the cursor, keeping it inside the text and the visible area."""
        max_cursor_y = min(
            self.render_size.height - 1,
            self.cursor_y + (len(self.lines) - self.line_index - 1),
        )
        self.line_index = min(max(self.line_index + dy, 0), len(self.lines) - 1)

        self.cursor_y += dy
        if self.cursor_y < 0:
            self.cursor_y = 0
        elif self.cursor_y > max_cursor_y:
            self.cursor_y = max_cursor_y

        line = self.lines[self.line_index]
        self.cursor_x = min(max(self.cursor_x + dx, 0), len(line))
        line.move_cursor_to(self.cursor_x)

    def name(self) -> str:
        return f"Tab({self.title})"

    def preferred_size(self) -> Size:
        return Size()

    def render(self, screen: Screen, mount_point: Point) -> Size:
        size = self.render_size
        first_line = self.line_index - self.cursor_y
        end_line = self.line_index + (size.height - self.cursor_y)

        show_cursor = True
        normal = Style()
        highlighted = Style(reverse=True)
        visible = self.lines[max(first_line, 0) : max(end_line, 0)]
        for screen_line, line in enumerate(visible):
            y = max(first_line, 0) + screen_line
            for x, char in line.enumerate():
                at_cursor = x == self.cursor_x and y == self.line_index
                if at_cursor:
                    show_cursor = False
                screen.set_content(
                    mount_point.x + x,
                    mount_point.y + screen_line,
                    char,
                    highlighted if at_cursor else normal,
                )
        if show_cursor:
            screen.show_cursor(mount_point.x + self.cursor_x, mount_point.y + self.cursor_y)
        return size

    def text(self) -> str:
        """The whole document, lines joined by newlines."""
        return "\n".join(str(line) for line in self.lines)

    def save(self) -> None:
        """Write the document to its path through a temporary file."""
        if not self.path:
            raise ValueError("tab has no path")
        tmp_path = self.path + ".tmp"
        with open(tmp_path, "wb") as handle:
            handle.write(b"\n".join(line.to_bytes() for line in self.lines))
        os.replace(tmp_path, self.path)