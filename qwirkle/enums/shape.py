from __future__ import annotations

from enum import Enum


class Shape(str, Enum):
    """The six distinct shapes printed on Qwirkle tiles."""

    CROSS = "cross"
    SQUARE = "square"
    ROUND = "round"
    STAR = "star"
    PLUS = "plus"
    DIAMOND = "diamond"

    @property
    def symbol(self) -> str:
        return SHAPE_SYMBOLS[self]


ALL_SHAPES: tuple[Shape, ...] = (
    Shape.CROSS,
    Shape.SQUARE,
    Shape.ROUND,
    Shape.STAR,
    Shape.PLUS,
    Shape.DIAMOND,
)

SHAPE_SYMBOLS: dict[Shape, str] = {
    Shape.CROSS: "X",
    Shape.SQUARE: "■",
    Shape.ROUND: "●",
    Shape.STAR: "*",
    Shape.PLUS: "+",
    Shape.DIAMOND: "♦",
}

# Number of values of either attribute; a line this long is complete.
ATTRIBUTE_CARDINALITY: int = len(ALL_SHAPES)
