"""The editor: ties the window, the status bar and key handling together."""

from __future__ import annotations

import re
import threading
from collections.abc import Sequence

from .events import (
    EventBus,
    Key,
    KeyEvent,
    KeyPress,
    ModeChanged,
    StateChanged,
    SubmittedCommand,
)
from .layout.containers import Column
from .layout.drawing import Screen
from .layout.geometry import Point, Size
from .line import Line
from .logger import write_log
from .state import Mode, State
from .tab import Tab
from .window import Window

_SAVE_OR_QUIT = re.compile("[wq]")

_CURSOR_MOVES = {
    Key.LEFT: (-1, 0),
    Key.RIGHT: (1, 0),
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
}


class Editor:
    """Owns the screen, the window of tabs and the status bar.

    Call :meth:`open` once (or :meth:`run`, which does it) before sending
    keys or rendering.
    """

    def __init__(self, screen: Screen, bus: EventBus | None = None) -> None:
        self.screen = screen
        self.bus = bus if bus is not None else EventBus()
        self.state = State(self.bus)
        self.window: Window | None = None
        self.focused: Window | State | None = None
        self.root: Column | None = None
        self._render_lock = threading.RLock()
        self.bus.on(ModeChanged, self._on_mode_changed)
        self.bus.on(StateChanged, self._on_state_changed)
        self.bus.on(SubmittedCommand, self._on_command)

    def run(self, args: Sequence[str] = ()) -> None:
        """Open the document named in ``args`` and process screen events until done."""
        self.open(args)
        self.render()
        while not self.state.finished:
            event = self.screen.poll_event()
            if event is None or self.state.finished:
                return
            if isinstance(event, KeyPress):
                self.handle_key(event)
            else:
                self.screen.sync()
                self.render()

    def open(self, args: Sequence[str]) -> Window:
        """Create the window with one tab: the file in ``args[0]`` or an empty one."""
        window = Window(self.state)
        if args:
            file_path = args[0]
            tab = Tab.from_path(file_path)
            tab.set_path(file_path)
        else:
            tab = Tab("new tab", Line.empty(64))
        window.add_tab(tab)
        self.window = window
        self.focused = window
        self.root = Column([window, self.state])
        return window

    def handle_key(self, press: KeyPress) -> None:
        """React to one key press and redraw."""
        write_log(press.modifiers, press.name, press.key, press.char)
        if press.key is Key.CTRL_C:
            self.state.set_finished()
            return
        focused = self._require_focused()
        move = _CURSOR_MOVES.get(press.key)
        if move is not None:
            focused.move_cursor(*move)
        elif self.state.is_mode(Mode.VIEW):
            self.bus.emit(KeyEvent(press))
        else:
            self.bus.emit(KeyEvent(press, target=focused))
        self.render()

    def render(self) -> None:
        """Lay out and draw everything on the screen."""
        if self.root is None:
            raise RuntimeError("nothing is open")
        with self._render_lock:
            self.screen.clear()
            self.screen.hide_cursor()
            width, height = self.screen.size()
            self.root.set_render_size(Size(width, height))
            self.root.render(self.screen, Point(0, 0))
            self.screen.show()

    def execute_command(self, cmd: str) -> None:
        """Run a submitted command line: ``path``, ``open`` or any of ``w``/``q``."""
        if cmd.startswith("path"):
            self.active_tab.set_path(cmd[5:])
        elif cmd.startswith("open"):
            try:
                tab = Tab.from_path(cmd[5:])
            except OSError as err:
                self.state.toast_message(f"err: {err}")
                return
            self._require_window().add_tab(tab)
        elif _SAVE_OR_QUIT.search(cmd):
            if "w" in cmd:
                try:
                    self.active_tab.save()
                except (OSError, ValueError) as err:
                    self.state.toast_message(f"err: {err}")
                    return
            if "q" in cmd:
                self.state.set_finished()
        else:
            self.state.toast_message(f"unknown command: {cmd}")

    @property
    def active_tab(self) -> Tab:
        return self._require_window().active_tab

    def _require_window(self) -> Window:
        if self.window is None:
            raise RuntimeError("nothing is open")
        return self.window

    def _require_focused(self) -> Window | State:
        if self.focused is None:
            raise RuntimeError("nothing is open")
        return self.focused

    def _on_mode_changed(self, event: ModeChanged) -> None:
        if self.focused is not None:
            self.focused.blur()
        self.focused = self.state if event.mode == Mode.COMMAND else self.window
        if self.focused is not None:
            self.focused.focus()

    def _on_state_changed(self, _event: StateChanged) -> None:
        if self.root is not None:
            self.render()

    def _on_command(self, event: SubmittedCommand) -> None:
        self.execute_command(event.command)