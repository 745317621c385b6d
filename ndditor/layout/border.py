"""Box borders and the characters used to draw them."""

from __future__ import annotations

from dataclasses import dataclass

H_LINE = "─"
V_LINE = "│"
UL_CORNER = "┌"
UR_CORNER = "┐"
LL_CORNER = "└"
LR_CORNER = "┘"
T_TEE = "┬"
B_TEE = "┴"
L_TEE = "├"
R_TEE = "┤"


@dataclass(frozen=True)
class Border:
    """Which sides of a box are drawn, with optional corner overrides."""

    top: bool = False
    bottom: bool = False
    left: bool = False
    right: bool = False
    top_right_tee: str | None = None
    top_left_tee: str | None = None
    bottom_right_tee: str | None = None
    bottom_left_tee: str | None = None

    def is_full(self) -> bool:
        """True when all four sides are drawn and no corner is overridden."""
        return (
            self.top
            and self.bottom
            and self.left
            and self.right
            and not any(
                (
                    self.top_right_tee,
                    self.top_left_tee,
                    self.bottom_right_tee,
                    self.bottom_left_tee,
                )
            )
        )

    def top_left_corner(self) -> str | None:
        if (self.top or self.left) and self.top_left_tee:
            return self.top_left_tee
        if self.top and self.left:
            return UL_CORNER
        return None

    def top_right_corner(self) -> str | None:
        if (self.top or self.right) and self.top_right_tee:
            return self.top_right_tee
        if self.top and self.right:
            return UR_CORNER
        return None

    def bottom_left_corner(self) -> str | None:
        if (self.bottom or self.left) and self.bottom_left_tee:
            return self.bottom_left_tee
        if self.bottom and self.left:
            return LL_CORNER
        return None

    def bottom_right_corner(self) -> str | None:
        if (self.bottom or self.right) and self.bottom_right_tee:
            return self.bottom_right_tee
        if self.bottom and self.right:
            return LR_CORNER
        return None


FULL_BORDER = Border(top=True, bottom=True, left=True, right=True)