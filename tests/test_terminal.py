import curses

import pytest

from ndditor.editor import Editor
from ndditor.events import Key, KeyPress
from ndditor.layout.drawing import Style
from ndditor.terminal import CursesScreen, translate_key


class FakeWindow:
    def __init__(self, keys=(), width=40, height=10):
        self.cells = {}
        self.keys = list(keys)
        self.width = width
        self.height = height
        self.moves = []
        self.refreshes = 0
        self.clears = 0

    def getmaxyx(self):
        return (self.height, self.width)

    def addstr(self, y, x, text, attr=0):
        self.cells[(x, y)] = (text, attr)

    def erase(self):
        self.cells.clear()

    def clear(self):
        self.cells.clear()
        self.clears += 1

    def move(self, y, x):
        self.moves.append((x, y))

    def refresh(self):
        self.refreshes += 1

    def get_wch(self):
        if not self.keys:
            raise curses.error("no input")
        return self.keys.pop(0)

    def row(self, y):
        return "".join(self.cells.get((x, y), (" ", 0))[0] for x in range(self.width)).rstrip()


@pytest.mark.parametrize(
    "code, expected",
    [
        ("\x03", Key.CTRL_C),
        ("\x05", Key.CTRL_E),
        ("\x11", Key.CTRL_Q),
        ("\x13", Key.CTRL_S),
        ("\x14", Key.CTRL_T),
        ("\x17", Key.CTRL_W),
        ("\r", Key.ENTER),
        ("\x1b", Key.ESCAPE),
        ("\x08", Key.BACKSPACE),
        ("\x7f", Key.BACKSPACE2),
        (curses.KEY_LEFT, Key.LEFT),
        (curses.KEY_RIGHT, Key.RIGHT),
        (curses.KEY_UP, Key.UP),
        (curses.KEY_DOWN, Key.DOWN),
        (curses.KEY_DC, Key.DELETE),
        (curses.KEY_BACKSPACE, Key.BACKSPACE),
        (curses.KEY_F1, Key.OTHER),
        ("\x01", Key.OTHER),
    ],
)
def test_translate_special_keys(code, expected):
    press = translate_key(code)
    assert press.key is expected
    assert press.char == ""


def test_translate_printable_character():
    assert translate_key("a") == KeyPress(Key.RUNE, "a")
    assert translate_key("é") == KeyPress(Key.RUNE, "é")


def test_size_is_width_then_height():
    screen = CursesScreen(FakeWindow(width=30, height=7))
    assert screen.size() == (30, 7)


def test_set_content_uses_reverse_attribute():
    window = FakeWindow()
    screen = CursesScreen(window)
    screen.set_content(2, 3, "x", Style(reverse=True))
    screen.set_content(4, 3, "y", Style())
    assert window.cells[(2, 3)] == ("x", curses.A_REVERSE)
    assert window.cells[(4, 3)] == ("y", curses.A_NORMAL)


def test_set_content_outside_is_ignored():
    window = FakeWindow(width=5, height=5)
    screen = CursesScreen(window)
    screen.set_content(5, 0, "x", Style())
    screen.set_content(-1, 2, "x", Style())
    assert window.cells == {}


def test_show_moves_to_visible_cursor():
    window = FakeWindow()
    screen = CursesScreen(window)
    screen.show_cursor(3, 4)
    screen.show()
    assert window.moves == [(3, 4)]
    assert window.refreshes == 1


def test_hidden_cursor_is_not_moved():
    window = FakeWindow()
    screen = CursesScreen(window)
    screen.show_cursor(3, 4)
    screen.hide_cursor()
    screen.show()
    assert window.moves == []


def test_poll_event_translates_and_ends():
    window = FakeWindow(keys=["q", curses.KEY_RESIZE])
    screen = CursesScreen(window)
    assert screen.poll_event() == KeyPress(Key.RUNE, "q")
    resize = screen.poll_event()
    assert not isinstance(resize, KeyPress)
    assert resize is not None
    assert screen.poll_event() is None


def test_editor_runs_on_curses_screen(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    window = FakeWindow(keys=["i", "o", "k", "\x03"])
    ed = Editor(CursesScreen(window))
    ed.run([])
    assert ed.active_tab.text() == "ok"
    assert ed.state.finished
    assert window.row(9) == "-- INSERT --"


def test_resize_forces_repaint(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    window = FakeWindow(keys=[curses.KEY_RESIZE, "\x03"])
    ed = Editor(CursesScreen(window))
    ed.run([])
    assert window.clears == 1
    assert window.row(9) == "-- VIEW --"