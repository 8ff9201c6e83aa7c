"""Placement requests accepted by the board.

Requests are built by the caller from hand content and target cells, handed to
one `Board` call and then thrown away.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from qwirkle.enums.direction import Direction
from qwirkle.models.tile import Tile, TileAtPosition


class TilePlacement(BaseModel):
    """One tile at one cell."""

    row: int
    col: int
    tile: Tile

    model_config = {
        "frozen": True,
    }


class RunPlacement(BaseModel):
    """Tiles written one per cell from (row, col) stepping along `direction`."""

    row: int
    col: int
    direction: Direction
    tiles: list[Tile] = Field(..., min_length=1)

    model_config = {
        "frozen": True,
    }


class SetPlacement(BaseModel):
    """Free (row, col, tile) triples that must end up on one straight line."""

    placements: list[TileAtPosition] = Field(..., min_length=1)

    model_config = {
        "frozen": True,
    }


PlacementRequest = TilePlacement | RunPlacement | SetPlacement
