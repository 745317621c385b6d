"""Editor mode, command line and status bar."""

from __future__ import annotations

import threading
from enum import IntEnum

from .events import EventBus, Key, KeyEvent, ModeChanged, StateChanged, SubmittedCommand
from .layout.drawing import Color, Screen, draw_text
from .layout.geometry import BaseElement, Point, Size
from .line import Line


class Mode(IntEnum):
    VIEW = 0
    INSERT = 1
    COMMAND = 2


class State(BaseElement):
    """Holds the editor mode and the pending command, and draws the status bar."""

    def __init__(self, bus: EventBus, *, toast_duration: float = 1.5) -> None:
        super().__init__()
        self.bus = bus
        self.mode = Mode.VIEW
        self.error_message = ""
        self.pending_command = Line.empty(64)
        self.cursor_x = 0
        self.finished = False
        self.toast_duration = toast_duration
        bus.on(KeyEvent, self._on_key)

    def _on_key(self, event: KeyEvent) -> None:
        press = event.press
        if press.key is Key.ESCAPE:
            if not self.is_mode(Mode.VIEW):
                self.set_mode(Mode.VIEW)
        elif press.key is Key.ENTER:
            if self.is_mode(Mode.COMMAND):
                cmd = self.command
                self.set_mode(Mode.VIEW)
                self.bus.emit(SubmittedCommand(cmd))
        elif press.key in (Key.BACKSPACE, Key.BACKSPACE2):
            if self.is_mode(Mode.COMMAND):
                self.delete()
        elif press.char:
            if self.is_mode(Mode.VIEW):
                if press.char == "i":
                    self.set_mode(Mode.INSERT)
                elif press.char == ":":
                    self.set_mode(Mode.COMMAND)
            elif self.is_mode(Mode.COMMAND):
                self.append_to_command(press.char)

    def is_mode(self, mode: Mode) -> bool:
        return self.mode == mode

    def set_mode(self, mode: Mode) -> None:
        """Switch mode, clearing the message and the pending command."""
        self.error_message = ""
        self.mode = mode
        self.pending_command = Line.empty(64)
        self.cursor_x = 0
        self.bus.emit(ModeChanged(mode))

    def toast_message(self, message: str) -> None:
        """Show ``message`` in the status bar for a short while."""
        self.error_message = message
        timer = threading.Timer(self.toast_duration, self._clear_toast)
        timer.daemon = True
        timer.start()

    def _clear_toast(self) -> None:
        self.error_message = ""
        self.bus.emit(StateChanged())

    def append_to_command(self, char: str) -> None:
        self.pending_command.insert(char)
        self.cursor_x += 1

    def write_to_command(self, text: str) -> None:
        for char in text:
            self.append_to_command(char)

    @property
    def command(self) -> str:
        """The pending command text."""
        return str(self.pending_command)

    def delete(self) -> None:
        """Delete the command character before the cursor."""
        self.pending_command.delete_before_cursor()
        if self.cursor_x > 0:
            self.cursor_x -= 1

    def set_finished(self) -> None:
        self.finished = True

    def name(self) -> str:
        return "State"

    def preferred_size(self) -> Size:
        return Size(height=1)

    def render(self, screen: Screen, point: Point) -> Size:
        size = self.render_size
        color = Color.RED if self.error_message else Color.DEFAULT
        draw_text(screen, point, point.add_size(size), self.info_line, color)
        if self.is_mode(Mode.COMMAND):
            screen.show_cursor(point.x + self.cursor_x + 1, point.y)
        return size

    def move_cursor(self, dx: int, dy: int) -> None:
        """Move the command-line cursor horizontally; ``dy`` is ignored."""
        if dx == 0:
            return
        self.cursor_x = min(max(self.cursor_x + dx, 0), len(self.pending_command))
        self.pending_command.move_cursor_to(self.cursor_x)

    @property
    def info_line(self) -> str:
        """The text shown in the status bar."""
        if self.error_message:
            return self.error_message
        if self.is_mode(Mode.COMMAND):
            return f":{self.command}"
        mode = "INSERT" if self.is_mode(Mode.INSERT) else "VIEW"
        return f"-- {mode} --"