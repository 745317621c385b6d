"""A single line of text stored in a gap buffer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_FILL = "\0"


class Line:
    """A line of text with a movable insertion point.

    Characters live in a list with a gap at the cursor, so inserting and
    deleting next to the cursor does not shift the rest of the line.
    """

    __slots__ = ("_data", "_gap_start", "_gap_end")

    def __init__(self, data: list[str], gap_start: int, gap_end: int) -> None:
        if not 0 <= gap_start <= gap_end <= len(data):
            raise ValueError("gap must lie within the buffer")
        self._data = data
        self._gap_start = gap_start
        self._gap_end = gap_end

    @classmethod
    def empty(cls, size: int = 64) -> Line:
        """Create an empty line with room for ``size`` characters."""
        if size < 0:
            raise ValueError("size must not be negative")
        return cls([_FILL] * size, 0, size)

    @classmethod
    def from_text(cls, content: Iterable[str], cursor_at_start: bool = False) -> Line:
        """Create a line holding ``content``, cursor at its start or end."""
        chars = list(content)
        count = len(chars)
        if cursor_at_start:
            return cls([_FILL] * count + chars, 0, count)
        return cls(chars + [_FILL] * count, count, 2 * count)

    def __len__(self) -> int:
        return len(self._data) - (self._gap_end - self._gap_start)

    def __iter__(self) -> Iterator[str]:
        yield from self._data[: self._gap_start]
        yield from self._data[self._gap_end :]

    def __str__(self) -> str:
        return "".join(self)

    def __repr__(self) -> str:
        return f"Line({str(self)!r}, cursor={self._gap_start})"

    @property
    def gap_start(self) -> int:
        """Index of the first gap cell; also the cursor position."""
        return self._gap_start

    @property
    def gap_end(self) -> int:
        """Index just past the last gap cell."""
        return self._gap_end

    @property
    def debug_view(self) -> str:
        """The raw buffer with every gap cell shown as ``_``."""
        return "".join(
            "_" if self._gap_start <= index < self._gap_end else char
            for index, char in enumerate(self._data)
        )

    def insert(self, char: str) -> None:
        """Insert one character at the cursor."""
        if len(char) != 1:
            raise ValueError("insert takes exactly one character")
        if self._gap_start == self._gap_end:
            self._grow()
        self._data[self._gap_start] = char
        self._gap_start += 1

    def append(self, other: Line) -> None:
        """Add the content of ``other`` to the end of this line."""
        self.move_cursor_to(len(self))
        for char in other:
            self.insert(char)

    def delete_before_cursor(self) -> None:
        if self._gap_start > 0:
            self._gap_start -= 1

    def delete_after_cursor(self) -> None:
        if self._gap_end < len(self._data):
            self._gap_end += 1

    def cut_after_cursor(self) -> str:
        """Remove and return everything after the cursor."""
        tail = "".join(self._data[self._gap_end :])
        self._gap_end = len(self._data)
        return tail

    def move_cursor_delta(self, delta: int) -> None:
        self.move_cursor_to(self._gap_start + delta)

    def move_cursor_to(self, pos: int) -> None:
        """Move the cursor to ``pos``, clamped to the line."""
        self.move_gap_to(min(max(pos, 0), len(self)))

    def move_gap_to(self, pos: int) -> None:
        """Move the gap so that it starts at logical position ``pos``."""
        if not 0 <= pos <= len(self):
            raise IndexError(f"gap position {pos} outside line of length {len(self)}")
        data = self._data
        if pos < self._gap_start:
            chunk = data[pos : self._gap_start]
            count = len(chunk)
            data[self._gap_end - count : self._gap_end] = chunk
            self._gap_end -= count
            self._gap_start = pos
        elif pos > self._gap_start:
            count = pos - self._gap_start
            data[self._gap_start : pos] = data[self._gap_end : self._gap_end + count]
            self._gap_end += count
            self._gap_start = pos

    def enumerate(self) -> Iterator[tuple[int, str]]:
        """Yield ``(position, character)`` pairs in logical order."""
        return enumerate(self)

    def to_bytes(self) -> bytes:
        return str(self).encode("utf-8")

    def _grow(self) -> None:
        tail = self._data[self._gap_end :]
        new_size = max(len(self._data) * 2, 1)
        gap = new_size - self._gap_start - len(tail)
        self._data = self._data[: self._gap_start] + [_FILL] * gap + tail
        self._gap_end = new_size - len(tail)