from __future__ import annotations

import logging
from collections.abc import Sequence

from qwirkle.enums.direction import Direction
from qwirkle.models.board import GRID_SIZE, Board
from qwirkle.models.placement_result import PlacementResult
from qwirkle.models.player import HAND_SIZE, Player
from qwirkle.models.tile import Tile, TileAtPosition
from qwirkle.models.tile_bag import COPIES_PER_TILE, TileBag

logger = logging.getLogger(__name__)

FINISHING_BONUS = 6


class GameSession:
    """One game: the board, the bag and the players taking turns.

    Moves are given as positions in the current player's hand. A refused move
    leaves the whole session untouched and returns the board's rejection; an
    accepted move credits the points, refills the hand and passes the turn.
    """

    def __init__(
        self,
        players: Sequence[Player],
        board: Board | None = None,
        bag: TileBag | None = None,
        hand_size: int = HAND_SIZE,
        current_index: int = 0,
        passes_in_a_row: int = 0,
        finished: bool = False,
    ):
        if len(players) < 2:
            msg = f"A game needs at least 2 players, got {len(players)}"
            raise ValueError(msg)
        if not 0 <= current_index < len(players):
            msg = f"Current player index {current_index} is out of range"
            raise ValueError(msg)

        self.players = list(players)
        self.board = board if board is not None else Board()
        self.bag = bag if bag is not None else TileBag.full()
        self.hand_size = hand_size
        self.current_index = current_index
        self.passes_in_a_row = passes_in_a_row
        self.finished = finished

    @classmethod
    def new(
        cls,
        player_names: Sequence[str],
        board_size: int = GRID_SIZE,
        hand_size: int = HAND_SIZE,
        copies_per_tile: int = COPIES_PER_TILE,
        seed: int | None = None,
    ) -> GameSession:
        """Start a fresh game and deal every player a full hand."""
        session = cls(
            players=[Player(name=name) for name in player_names],
            board=Board(size=board_size),
            bag=TileBag.full(copies=copies_per_tile, seed=seed),
            hand_size=hand_size,
        )
        for player in session.players:
            player.refill(session.bag, hand_size)
        logger.info("New game for %s, %d tile(s) left in the bag", list(player_names), session.bag.size())
        return session

    @property
    def current_player(self) -> Player:
        return self.players[self.current_index]

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def first(self, direction: Direction, indexes: Sequence[int]) -> PlacementResult:
        tiles = self.current_player.take(indexes)
        return self._settle(tiles, self.board.first_move(direction, tiles))

    def play_tile(self, row: int, col: int, index: int) -> PlacementResult:
        tiles = self.current_player.take([index])
        return self._settle(tiles, self.board.place_tile(row, col, tiles[0]))

    def play_run(self, row: int, col: int, direction: Direction, indexes: Sequence[int]) -> PlacementResult:
        tiles = self.current_player.take(indexes)
        return self._settle(tiles, self.board.place_run(row, col, direction, tiles))

    def play_set(self, triples: Sequence[tuple[int, int, int]]) -> PlacementResult:
        """Play (row, col, hand index) triples as one free placement."""
        tiles = self.current_player.take([index for _, _, index in triples])
        placements = [
            TileAtPosition(row=row, col=col, tile=tile) for (row, col, _), tile in zip(triples, tiles, strict=True)
        ]
        return self._settle(tiles, self.board.place_set(placements))

    def pass_turn(self) -> None:
        logger.info("%s passes", self.current_player.name)
        self.passes_in_a_row += 1
        self._next_player()

    def _settle(self, tiles: list[Tile], result: PlacementResult) -> PlacementResult:
        if not result.ok:
            return result

        player = self.current_player
        player.add_score(result.points)
        player.remove(tiles)
        player.refill(self.bag, self.hand_size)
        logger.info("%s scores %d (total %d)", player.name, result.points, player.score)

        if self.bag.is_empty() and not player.hand:
            player.add_score(FINISHING_BONUS)
            self.finished = True
            logger.info("%s played their last tile and gets %d bonus points", player.name, FINISHING_BONUS)

        self.passes_in_a_row = 0
        self._next_player()
        return result

    def _next_player(self) -> None:
        self.current_index = (self.current_index + 1) % len(self.players)
        self.current_player.refill(self.bag, self.hand_size)

    # ------------------------------------------------------------------
    # End of game
    # ------------------------------------------------------------------

    def any_player_can_play(self) -> bool:
        """Check whether some tile of some hand fits somewhere on the board.

        Every legal cell touches a placed tile, so only the viewport is probed.
        """
        if self.board.is_empty():
            return any(player.hand for player in self.players)

        cells = list(self.board.viewport.cells())
        for player in self.players:
            for tile in set(player.hand):
                if any(self.board.can_place(row, col, tile) for row, col in cells):
                    return True
        return False

    def is_over(self) -> bool:
        if self.finished:
            return True
        if not self.bag.is_empty():
            return False
        if self.passes_in_a_row >= len(self.players) or not self.any_player_can_play():
            self.finished = True
            logger.info("Game over: no player can place a tile")
        return self.finished

    def winners(self) -> list[Player]:
        best = max(player.score for player in self.players)
        return [player for player in self.players if player.score == best]
