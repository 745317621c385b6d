"""A window holding several tabs with a title bar."""

from __future__ import annotations

from .events import Key, KeyEvent
from .layout.border import B_TEE, L_TEE, T_TEE, UR_CORNER, Border
from .layout.containers import Column, Row
from .layout.drawing import Color, Screen
from .layout.geometry import BaseElement, Element, Point, Size
from .layout.sizedbox import SizedBox
from .line import Line
from .state import Mode, State
from .tab import Tab


def _new_tab() -> Tab:
    return Tab("new tab", Line.empty(64))


class Window(BaseElement):
    """A list of tabs, one of them active, reacting to key events."""

    def __init__(self, state: State) -> None:
        super().__init__()
        self.state = state
        self.tabs: list[Tab] = []
        self.active_index = 0
        state.bus.on(KeyEvent, self._on_key)

    @property
    def active_tab(self) -> Tab:
        return self.tabs[self.active_index]

    def set_active_tab(self, index: int) -> None:
        self.active_index = index

    def add_tab(self, tab: Tab) -> None:
        """Append ``tab`` and make it active."""
        self.tabs.append(tab)
        self.set_active_tab(len(self.tabs) - 1)

    def previous_tab(self) -> None:
        if self.active_index > 0:
            self.set_active_tab(self.active_index - 1)

    def next_tab(self) -> None:
        if self.active_index < len(self.tabs) - 1:
            self.set_active_tab(self.active_index + 1)

    def close_tab(self) -> None:
        """Close the active tab; closing the last one leaves a fresh empty tab."""
        if len(self.tabs) > 1:
            del self.tabs[self.active_index]
            self.active_index = min(self.active_index, len(self.tabs) - 1)
        else:
            self.tabs = []
            self.add_tab(_new_tab())

    def preferred_size(self) -> Size:
        return Size()

    def name(self) -> str:
        return "Window"

    def render(self, screen: Screen, point: Point) -> Size:
        column = Column(
            [
                self._title_bar(),
                SizedBox(
                    border=Border(left=True, right=True, bottom=True),
                    child=self.active_tab,
                ),
            ]
        )
        column.set_render_size(self.render_size)
        return column.render(screen, point)

    def _title_bar(self) -> Element:
        count = len(self.tabs)
        titles: list[Element] = []
        for index, tab in enumerate(self.tabs):
            is_first = index == 0
            is_last = index == count - 1
            if index == self.active_index:
                content = f" > {tab.title} "
                color = Color.GREEN
            else:
                content = f"   {tab.title} "
                color = Color.DEFAULT
            titles.append(
                SizedBox(
                    border=Border(
                        top=True,
                        right=True,
                        bottom=True,
                        left=is_first,
                        top_right_tee=UR_CORNER if is_last else T_TEE,
                        bottom_right_tee=B_TEE,
                        bottom_left_tee=L_TEE if is_first else None,
                    ),
                    text_color=color,
                    size=Size(len(content) + (2 if is_first else 1), 3),
                    content=content,
                )
            )
        titles.append(SizedBox(border=Border(bottom=True, bottom_right_tee=UR_CORNER)))
        return Row(titles)

    def move_cursor(self, dx: int, dy: int) -> None:
        self.active_tab.move_cursor(dx, dy)

    def _on_key(self, event: KeyEvent) -> None:
        key = event.press.key
        if event.target is not self:
            if key is Key.CTRL_Q:
                self.previous_tab()
            elif key is Key.CTRL_W:
                self.close_tab()
            elif key is Key.CTRL_E:
                self.next_tab()
            elif key is Key.CTRL_T:
                self.add_tab(_new_tab())
            return

        state = self.state
        tab = self.active_tab
        if key is Key.CTRL_S:
            if not tab.path:
                state.set_mode(Mode.COMMAND)
                state.write_to_command("path ")
                return
            try:
                tab.save()
            except (OSError, ValueError) as err:
                state.toast_message(f"err: {err}")
        elif key is Key.ENTER:
            if state.is_mode(Mode.INSERT):
                tab.insert_newline()
        elif key in (Key.BACKSPACE, Key.BACKSPACE2):
            if state.is_mode(Mode.INSERT):
                tab.backspace()
        elif key is Key.DELETE:
            if state.is_mode(Mode.INSERT):
                tab.delete()
        elif event.press.char and state.is_mode(Mode.INSERT) and self.is_focused:
            tab.insert_rune(event.press.char)