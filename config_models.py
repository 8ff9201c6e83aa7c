"""
Pydantic models for configuration management in the Qwirkle game.

This module defines the data structure read from a JSON configuration file
describing how a new game is set up: who plays, the board size, the hand
size and the composition of the tile bag.
"""

import json
from pathlib import Path

from pydantic import BaseModel, Field

from qwirkle.models.board import GRID_SIZE
from qwirkle.models.game_session import GameSession
from qwirkle.models.player import HAND_SIZE
from qwirkle.models.tile_bag import COPIES_PER_TILE


class GameConfiguration(BaseModel):
    """
    Settings for one new game.

    Every field has a default matching the standard rules, so an empty JSON
    object is a valid configuration.
    """

    player_names: list[str] = Field(
        default_factory=lambda: ["Player 1", "Player 2"],
        description="Names of the 2 to 4 players, in turn order",
        min_length=2,
        max_length=4,
    )

    board_size: int = Field(default=GRID_SIZE, ge=GRID_SIZE, description="Side of the square board")
    hand_size: int = Field(default=HAND_SIZE, ge=1, le=HAND_SIZE, description="Tiles held by each player")
    copies_per_tile: int = Field(default=COPIES_PER_TILE, ge=1, description="Copies of each color/shape in the bag")
    seed: int | None = Field(default=None, description="Seed for the bag; None for an unpredictable game")

    def create_session(self) -> GameSession:
        """Start a new game session with these settings."""
        return GameSession.new(
            self.player_names,
            board_size=self.board_size,
            hand_size=self.hand_size,
            copies_per_tile=self.copies_per_tile,
            seed=self.seed,
        )


def load_configuration(json_file_path: str | Path) -> GameConfiguration:
    """Read a `GameConfiguration` from a JSON file."""
    with open(json_file_path, encoding="utf-8") as f:
        data = json.load(f)
    return GameConfiguration.model_validate(data)
