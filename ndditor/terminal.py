"""A curses-backed screen and the command-line entry point."""

from __future__ import annotations

import curses
import os
import sys
from collections.abc import Sequence
from typing import Any

from .editor import Editor
from .events import Key, KeyPress
from .layout.drawing import Color, Style


class _Resize:
    """Marks that the terminal changed size."""


_RESIZE = _Resize()

_CURSES_COLORS = {
    Color.BLACK: curses.COLOR_BLACK,
    Color.RED: curses.COLOR_RED,
    Color.GREEN: curses.COLOR_GREEN,
    Color.YELLOW: curses.COLOR_YELLOW,
    Color.BLUE: curses.COLOR_BLUE,
    Color.MAGENTA: curses.COLOR_MAGENTA,
    Color.CYAN: curses.COLOR_CYAN,
    Color.WHITE: curses.COLOR_WHITE,
}

_SPECIAL_KEYS = {
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    curses.KEY_DC: Key.DELETE,
    curses.KEY_ENTER: Key.ENTER,
}

_CONTROL_KEYS = {
    "\x03": Key.CTRL_C,
    "\x05": Key.CTRL_E,
    "\x11": Key.CTRL_Q,
    "\x13": Key.CTRL_S,
    "\x14": Key.CTRL_T,
    "\x17": Key.CTRL_W,
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\x1b": Key.ESCAPE,
    "\x08": Key.BACKSPACE,
    "\x7f": Key.BACKSPACE2,
}


def translate_key(code: int | str) -> KeyPress:
    """Turn a curses key code or character into a key press."""
    if isinstance(code, int):
        return KeyPress(_SPECIAL_KEYS.get(code, Key.OTHER))
    if code in _CONTROL_KEYS:
        return KeyPress(_CONTROL_KEYS[code])
    if len(code) == 1 and (code == "\t" or code.isprintable()):
        return KeyPress(Key.RUNE, code)
    return KeyPress(Key.OTHER)


class CursesScreen:
    """A screen drawn through a curses window.

    With ``live`` set, colours and cursor visibility are driven through the
    curses library, which needs an initialised terminal.
    """

    def __init__(self, window: Any, *, live: bool = False) -> None:
        self.window = window
        self.live = live
        self._cursor: tuple[int, int] | None = None
        self._pairs: dict[Color, int] = {}
        if live:
            self._init_colors()

    def _init_colors(self) -> None:
        if not curses.has_colors():
            return
        curses.start_color()
        try:
            curses.use_default_colors()
            background = -1
        except curses.error:
            background = curses.COLOR_BLACK
        for number, (color, code) in enumerate(_CURSES_COLORS.items(), start=1):
            try:
                curses.init_pair(number, code, background)
            except curses.error:
                break
            self._pairs[color] = number

    def _attr(self, style: Style) -> int:
        attr = curses.A_REVERSE if style.reverse else curses.A_NORMAL
        pair = self._pairs.get(style.foreground)
        if pair:
            attr |= curses.color_pair(pair)
        return attr

    def _inside(self, x: int, y: int) -> bool:
        width, height = self.size()
        return 0 <= x < width and 0 <= y < height

    def set_content(self, x: int, y: int, char: str, style: Style) -> None:
        if not self._inside(x, y):
            return
        try:
            self.window.addstr(y, x, char, self._attr(style))
        except curses.error:
            # Writing the bottom-right cell pushes the cursor off screen.
            pass

    def show_cursor(self, x: int, y: int) -> None:
        self._cursor = (x, y)

    def hide_cursor(self) -> None:
        self._cursor = None

    def clear(self) -> None:
        self.window.erase()

    def size(self) -> tuple[int, int]:
        """The screen's width and height."""
        height, width = self.window.getmaxyx()
        return width, height

    def show(self) -> None:
        if self._cursor is not None:
            x, y = self._cursor
            if self._inside(x, y):
                try:
                    self.window.move(y, x)
                except curses.error:
                    pass
        self._set_cursor_visible(self._cursor is not None)
        self.window.refresh()

    def sync(self) -> None:
        """Force a full repaint on the next refresh."""
        self.window.clear()

    def poll_event(self) -> object:
        """Wait for a key; return a key press, a resize marker, or None."""
        try:
            code = self.window.get_wch()
        except curses.error:
            return None
        if code == curses.KEY_RESIZE:
            return _RESIZE
        return translate_key(code)

    def _set_cursor_visible(self, visible: bool) -> None:
        if not self.live:
            return
        try:
            curses.curs_set(2 if visible else 0)
        except curses.error:
            try:
                curses.curs_set(1 if visible else 0)
            except curses.error:
                pass


def _session(stdscr: Any, args: Sequence[str]) -> None:
    curses.raw()
    stdscr.keypad(True)
    Editor(CursesScreen(stdscr, live=True)).run(args)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the editor on the terminal, opening the file named first, if any."""
    args = list(sys.argv[1:] if argv is None else argv)
    os.environ.setdefault("ESCDELAY", "25")
    try:
        curses.wrapper(_session, args)
    except OSError as err:
        print(f"error reading file: {err}", file=sys.stderr)
        return 1
    except curses.error as err:
        print(f"failed to init screen: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())