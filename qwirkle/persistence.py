"""JSON save files for game sessions."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from qwirkle.models.board import Board, Viewport
from qwirkle.models.game_session import GameSession
from qwirkle.models.player import Player
from qwirkle.models.tile import Tile, TileAtPosition
from qwirkle.models.tile_bag import TileBag

logger = logging.getLogger(__name__)

SAVE_SUFFIX = ".qwirkle.json"


class SnapshotError(ValueError):
    """A save file that cannot be read back into a game."""


class GameSnapshot(BaseModel):
    """Everything needed to resume a session."""

    board_size: int
    viewport: Viewport
    cells: list[TileAtPosition] = Field(default_factory=list, description="Placed tiles in row-major order.")
    bag: list[Tile] = Field(default_factory=list, description="Tiles still in the bag.")
    players: list[Player] = Field(..., min_length=2)
    hand_size: int = Field(..., ge=1)
    current_index: int = Field(..., ge=0)
    passes_in_a_row: int = Field(default=0, ge=0)
    finished: bool = False

    @classmethod
    def from_session(cls, session: GameSession) -> GameSnapshot:
        return cls(
            board_size=session.board.size,
            viewport=session.board.viewport,
            cells=session.board.placed_tiles(),
            bag=list(session.bag.tiles),
            players=session.players,
            hand_size=session.hand_size,
            current_index=session.current_index,
            passes_in_a_row=session.passes_in_a_row,
            finished=session.finished,
        )

    def to_session(self) -> GameSession:
        board = Board(
            size=self.board_size,
            tiles_by_pos={placement.cell: placement.tile for placement in self.cells},
            viewport=self.viewport.model_copy(),
        )
        return GameSession(
            players=[player.model_copy(deep=True) for player in self.players],
            board=board,
            bag=TileBag(tiles=list(self.bag)),
            hand_size=self.hand_size,
            current_index=self.current_index,
            passes_in_a_row=self.passes_in_a_row,
            finished=self.finished,
        )


def save_path(name: str | Path) -> Path:
    """Append the save-file suffix unless `name` already ends with it."""
    path = Path(name)
    if not path.name.endswith(SAVE_SUFFIX):
        path = path.with_name(path.name + SAVE_SUFFIX)
    return path


def save_game(session: GameSession, name: str | Path) -> Path:
    path = save_path(name)
    path.write_text(GameSnapshot.from_session(session).model_dump_json(indent=2), encoding="utf-8")
    logger.info("Game saved to %s", path)
    return path


def load_game(name: str | Path) -> GameSession:
    path = save_path(name)
    try:
        snapshot = GameSnapshot.model_validate_json(path.read_text(encoding="utf-8"))
        session = snapshot.to_session()
    except OSError as err:
        msg = f"Cannot read save file {path}: {err}"
        raise SnapshotError(msg) from err
    except ValidationError as err:
        msg = f"Save file {path} is not a valid game: {err.error_count()} error(s)"
        raise SnapshotError(msg) from err
    except ValueError as err:
        msg = f"Save file {path} is not a valid game: {err}"
        raise SnapshotError(msg) from err

    logger.info("Game loaded from %s", path)
    return session
