from ndditor.layout.border import (
    B_TEE,
    FULL_BORDER,
    L_TEE,
    LL_CORNER,
    LR_CORNER,
    T_TEE,
    UL_CORNER,
    UR_CORNER,
    Border,
)


def test_corner_characters():
    corners = (
        FULL_BORDER.top_left_corner(),
        FULL_BORDER.top_right_corner(),
        FULL_BORDER.bottom_left_corner(),
        FULL_BORDER.bottom_right_corner(),
    )
    assert corners == ("┌", "┐", "└", "┘")


def test_full_border_is_full():
    assert FULL_BORDER.is_full() is True


def test_partial_border_is_not_full():
    assert Border(top=True, bottom=True, left=True).is_full() is False


def test_border_with_tee_is_not_full():
    border = Border(top=True, bottom=True, left=True, right=True, top_right_tee=T_TEE)
    assert border.is_full() is False


def test_full_border_corners():
    assert FULL_BORDER.top_left_corner() == UL_CORNER
    assert FULL_BORDER.top_right_corner() == UR_CORNER
    assert FULL_BORDER.bottom_left_corner() == LL_CORNER
    assert FULL_BORDER.bottom_right_corner() == LR_CORNER


def test_no_corner_without_both_sides():
    border = Border(top=True)
    assert border.top_left_corner() is None
    assert border.top_right_corner() is None
    assert border.bottom_left_corner() is None
    assert border.bottom_right_corner() is None


def test_tee_overrides_corner_when_a_side_is_drawn():
    border = Border(top=True, right=True, top_right_tee=T_TEE, bottom_right_tee=B_TEE)
    assert border.top_right_corner() == T_TEE
    assert border.bottom_right_corner() == B_TEE


def test_tee_ignored_without_adjacent_side():
    border = Border(bottom=True, top_left_tee=L_TEE)
    assert border.top_left_corner() is None


def test_bottom_left_tee_with_only_bottom():
    border = Border(bottom=True, bottom_left_tee=L_TEE)
    assert border.bottom_left_corner() == L_TEE