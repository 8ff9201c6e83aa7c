"""Pydantic models and the game engine for Qwirkle domain objects."""

from .board import GRID_SIZE, Board, Viewport
from .game_session import GameSession
from .placement import PlacementRequest, RunPlacement, SetPlacement, TilePlacement
from .placement_result import PlacementError, PlacementResult, Rejection
from .player import HAND_SIZE, Player
from .tile import Tile, TileAtPosition
from .tile_bag import TileBag

__all__ = [
    "Board",
    "Viewport",
    "GRID_SIZE",
    "HAND_SIZE",
    "Tile",
    "TileAtPosition",
    "TilePlacement",
    "RunPlacement",
    "SetPlacement",
    "PlacementRequest",
    "PlacementResult",
    "PlacementError",
    "Rejection",
    "Player",
    "TileBag",
    "GameSession",
]
