from __future__ import annotations

import random
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr

from qwirkle.enums.color import ALL_COLORS
from qwirkle.enums.shape import ALL_SHAPES
from qwirkle.models.tile import Tile

COPIES_PER_TILE = 3


def full_tile_set(copies: int = COPIES_PER_TILE) -> list[Tile]:
    """Every color/shape combination, `copies` times each (108 tiles by default)."""
    return [Tile(color=color, shape=shape) for color in ALL_COLORS for shape in ALL_SHAPES for _ in range(copies)]


class TileBag(BaseModel):
    """The draw pool of a game.

    A bag belongs to one game session, which hands it to players when they
    refill. Draws use a private RNG seeded from `seed`.
    """

    tiles: list[Tile] = Field(default_factory=full_tile_set, description="Tiles still in the bag.")
    seed: int | None = Field(default=None, description="Seed for the draw order; None draws unpredictably.")

    _rng: random.Random = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        self._rng = random.Random(self.seed)

    @classmethod
    def full(cls, copies: int = COPIES_PER_TILE, seed: int | None = None) -> TileBag:
        if copies < 1:
            msg = f"A bag needs at least one copy of each tile, got {copies}"
            raise ValueError(msg)
        return cls(tiles=full_tile_set(copies), seed=seed)

    def size(self) -> int:
        return len(self.tiles)

    def is_empty(self) -> bool:
        return not self.tiles

    def draw(self, count: int) -> list[Tile]:
        """Remove and return up to `count` random tiles; fewer when the bag runs low."""
        drawn = []
        for _ in range(min(max(count, 0), len(self.tiles))):
            drawn.append(self.tiles.pop(self._rng.randrange(len(self.tiles))))
        return drawn
