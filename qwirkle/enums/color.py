from __future__ import annotations

from enum import Enum


class Color(str, Enum):
    """The six distinct colors printed on Qwirkle tiles.

    Values are stable for serialization; `symbol` is the one-letter glyph used
    by the board renderer.
    """

    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    ORANGE = "orange"
    YELLOW = "yellow"
    PURPLE = "purple"

    @property
    def symbol(self) -> str:
        return COLOR_SYMBOLS[self]


ALL_COLORS: tuple[Color, ...] = (
    Color.BLUE,
    Color.RED,
    Color.GREEN,
    Color.ORANGE,
    Color.YELLOW,
    Color.PURPLE,
)

COLOR_SYMBOLS: dict[Color, str] = {
    Color.BLUE: "B",
    Color.RED: "R",
    Color.GREEN: "G",
    Color.ORANGE: "O",
    Color.YELLOW: "Y",
    Color.PURPLE: "P",
}
