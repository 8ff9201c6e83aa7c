from __future__ import annotations

from pydantic import BaseModel, Field

from qwirkle.enums.color import Color
from qwirkle.enums.shape import Shape


class Tile(BaseModel):
    """A tile with exactly one color and one shape.

    Tiles are interchangeable values: two tiles with the same color and shape
    are equal and hash the same.
    """

    color: Color
    shape: Shape

    model_config = {
        "frozen": True,
    }

    def __str__(self) -> str:
        return f"{self.color.symbol}{self.shape.symbol}"


class TileAtPosition(BaseModel):
    """A tile paired with the board cell it sits on (or is proposed for)."""

    row: int = Field(..., description="Row index, growing downwards")
    col: int = Field(..., description="Column index, growing to the right")
    tile: Tile

    model_config = {
        "frozen": True,
    }

    @property
    def cell(self) -> tuple[int, int]:
        return (self.row, self.col)
