"""Keys, editor events and a synchronous, type-dispatched event bus."""

from __future__ import annotations

import threading
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class Key(Enum):
    """Keys the editor distinguishes."""

    RUNE = auto()
    ENTER = auto()
    ESCAPE = auto()
    BACKSPACE = auto()
    BACKSPACE2 = auto()
    DELETE = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    CTRL_C = auto()
    CTRL_E = auto()
    CTRL_Q = auto()
    CTRL_S = auto()
    CTRL_T = auto()
    CTRL_W = auto()
    OTHER = auto()


@dataclass(frozen=True)
class KeyPress:
    """A key press; ``char`` holds the typed character, or is empty."""

    key: Key
    char: str = ""
    modifiers: int = 0

    @property
    def name(self) -> str:
        if self.key is Key.RUNE:
            return f"Rune[{self.char}]"
        return self.key.name


@dataclass(frozen=True)
class ModeChanged:
    """Emitted when the editor mode changes."""

    mode: Any


@dataclass(frozen=True)
class StateChanged:
    """Emitted when the state changes outside a key press."""


@dataclass(frozen=True)
class KeyEvent:
    """A key press other than the cursor arrows, aimed at ``target`` if set."""

    press: KeyPress
    target: Any = None


@dataclass(frozen=True)
class SubmittedCommand:
    """Emitted when a command line is submitted."""

    command: str


Handler = Callable[[Any], None]


class EventBus:
    """Calls the handlers registered for an event's exact type, in order."""

    def __init__(self) -> None:
        self._handlers: defaultdict[type, list[Handler]] = defaultdict(list)
        self._lock = threading.Lock()

    def on(self, event_type: type, handler: Handler) -> Callable[[], None]:
        """Register ``handler``; return a function that unregisters it."""
        with self._lock:
            self._handlers[event_type].append(handler)

        def off() -> None:
            with self._lock:
                handlers = self._handlers[event_type]
                if handler in handlers:
                    handlers.remove(handler)

        return off

    def emit(self, event: object) -> None:
        with self._lock:
            handlers = list(self._handlers.get(type(event), ()))
        for handler in handlers:
            handler(event)