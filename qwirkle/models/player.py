from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field

from qwirkle.models.tile import Tile
from qwirkle.models.tile_bag import TileBag

HAND_SIZE = 6


class Player(BaseModel):
    """A player: a name, the tiles in hand and the running score."""

    name: str = Field(..., min_length=1)
    hand: list[Tile] = Field(default_factory=list)
    score: int = Field(default=0, ge=0)

    def refill(self, bag: TileBag, hand_size: int = HAND_SIZE) -> None:
        """Draw from `bag` until the hand holds `hand_size` tiles or the bag is empty."""
        self.hand.extend(bag.draw(hand_size - len(self.hand)))

    def take(self, indexes: Sequence[int]) -> list[Tile]:
        """Return the hand tiles at `indexes`, in that order, without removing them.

        Raises:
            IndexError: If an index is not in the hand or is given twice
        """
        if len(set(indexes)) != len(indexes):
            msg = f"Hand positions must be distinct, got {list(indexes)}"
            raise IndexError(msg)

        tiles = []
        for index in indexes:
            if not 0 <= index < len(self.hand):
                msg = f"There is no tile at position {index} in {self.name}'s hand"
                raise IndexError(msg)
            tiles.append(self.hand[index])
        return tiles

    def remove(self, tiles: Iterable[Tile]) -> None:
        for tile in tiles:
            self.hand.remove(tile)

    def add_score(self, points: int) -> None:
        self.score += points
