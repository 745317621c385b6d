from ndditor.layout.border import H_LINE, LL_CORNER, LR_CORNER, UL_CORNER, UR_CORNER, V_LINE
from ndditor.layout.drawing import (
    Color,
    Style,
    draw_box,
    draw_hline,
    draw_text,
    draw_vline,
)
from ndditor.layout.geometry import Point


class FakeScreen:
    def __init__(self):
        self.cells = {}

    def set_content(self, x, y, char, style):
        self.cells[(x, y)] = (char, style)

    def char(self, x, y):
        return self.cells[(x, y)][0]

    def row_text(self, y):
        xs = sorted(x for (x, row) in self.cells if row == y)
        return "".join(self.cells[(x, y)][0] for x in xs)


def test_hline_covers_inclusive_range():
    screen = FakeScreen()
    draw_hline(screen, 2, 1, 5)
    assert set(screen.cells) == {(x, 2) for x in range(1, 6)}
    assert all(char == H_LINE for char, _ in screen.cells.values())
    assert all(style == Style() for _, style in screen.cells.values())


def test_hline_with_color():
    screen = FakeScreen()
    draw_hline(screen, 0, 0, 3, Color.RED)
    assert all(style.foreground is Color.RED for _, style in screen.cells.values())


def test_vline_covers_inclusive_range():
    screen = FakeScreen()
    draw_vline(screen, 4, 0, 3)
    assert set(screen.cells) == {(4, y) for y in range(0, 4)}
    assert all(char == V_LINE for char, _ in screen.cells.values())


def test_box_corners_edges_and_fill():
    screen = FakeScreen()
    draw_box(screen, Point(1, 1), Point(5, 4))
    assert screen.char(1, 1) == UL_CORNER
    assert screen.char(5, 1) == UR_CORNER
    assert screen.char(1, 4) == LL_CORNER
    assert screen.char(5, 4) == LR_CORNER
    assert screen.char(3, 1) == H_LINE
    assert screen.char(3, 4) == H_LINE
    assert screen.char(1, 2) == V_LINE
    assert screen.char(5, 3) == V_LINE
    assert screen.char(3, 2) == " "


def test_box_with_swapped_points_is_same():
    ordered = FakeScreen()
    swapped = FakeScreen()
    draw_box(ordered, Point(1, 1), Point(5, 4))
    draw_box(swapped, Point(5, 4), Point(1, 1))
    assert ordered.cells == swapped.cells


def test_single_row_box_has_no_corners():
    screen = FakeScreen()
    draw_box(screen, Point(0, 2), Point(4, 2))
    assert all(char == H_LINE for char, _ in screen.cells.values())


def test_text_fits_on_one_row():
    screen = FakeScreen()
    draw_text(screen, Point(0, 0), Point(10, 5), "abc")
    assert screen.row_text(0) == "abc"
    assert all(style == Style() for _, style in screen.cells.values())


def test_text_starts_at_first_point():
    screen = FakeScreen()
    draw_text(screen, Point(3, 2), Point(20, 5), "hi")
    assert set(screen.cells) == {(3, 2), (4, 2)}


def test_text_wraps_before_right_edge():
    screen = FakeScreen()
    draw_text(screen, Point(0, 0), Point(2, 5), "abcd")
    assert screen.row_text(0) == "ab"
    assert screen.row_text(1) == "cd"


def test_text_stops_past_bottom_row():
    screen = FakeScreen()
    draw_text(screen, Point(0, 0), Point(2, 0), "abcdef")
    assert {y for (_, y) in screen.cells} == {0}
    assert "c" not in screen.row_text(0)


def test_text_color():
    screen = FakeScreen()
    draw_text(screen, Point(0, 0), Point(10, 1), "ok", Color.GREEN)
    assert all(style.foreground is Color.GREEN for _, style in screen.cells.values())