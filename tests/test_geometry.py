import dataclasses

import pytest

from ndditor.layout.geometry import BaseElement, Point, Size


def test_size_defaults_to_zero():
    size = Size()
    assert (size.width, size.height) == (0, 0)


def test_subtract_is_inverse_of_addition():
    a = Size(7, 4)
    b = Size(2, 3)
    result = a.subtract(b)
    assert result.width + b.width == a.width
    assert result.height + b.height == a.height


def test_subtract_self_gives_zero():
    a = Size(9, 5)
    assert a.subtract(a) == Size()


def test_subtract_can_go_negative():
    small = Size(1, 1)
    big = Size(4, 6)
    result = small.subtract(big)
    assert result.width < 0 and result.height < 0


def test_point_add_size_moves_by_size():
    p = Point(3, 5)
    s = Size(2, 6)
    q = p.add_size(s)
    assert (q.x - p.x, q.y - p.y) == (s.width, s.height)


def test_point_add_zero_size_is_identity():
    p = Point(8, 1)
    assert p.add_size(Size()) == p


def test_string_forms():
    assert str(Size(3, 4)) == "Size(3, 4)"
    assert str(Point(1, 2)) == "Point(1, 2)"


def test_size_is_immutable():
    size = Size(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        size.width = 5
    assert (size.width, size.height) == (1, 2)


def test_base_element_render_size():
    element = BaseElement()
    assert element.render_size == Size()
    element.set_render_size(Size(10, 20))
    assert element.render_size == Size(10, 20)


def test_base_element_focus_and_blur():
    element = BaseElement()
    assert element.is_focused is False
    element.focus()
    assert element.is_focused is True
    element.blur()
    assert element.is_focused is False


def test_base_elements_compare_by_identity():
    first = BaseElement()
    second = BaseElement()
    elements = [first, second]
    assert elements.index(first) == 0
    assert elements.index(second) == 1
    assert (first == second) is False