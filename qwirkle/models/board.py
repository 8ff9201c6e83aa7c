from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field, model_validator

from qwirkle.enums.direction import Direction
from qwirkle.enums.rejection_reason import RejectionReason
from qwirkle.enums.shape import ATTRIBUTE_CARDINALITY
from qwirkle.models.placement import PlacementRequest, RunPlacement, SetPlacement, TilePlacement
from qwirkle.models.placement_result import PlacementResult, Rejection
from qwirkle.models.tile import Tile, TileAtPosition

logger = logging.getLogger(__name__)

Cell = tuple[int, int]

GRID_SIZE = 91
VIEWPORT_MARGIN = 2

# A line holding every value of its shared attribute earns a fixed bonus.
COMPLETED_LINE_LENGTH = ATTRIBUTE_CARDINALITY
COMPLETED_LINE_BONUS = ATTRIBUTE_CARDINALITY

ROW_DIRECTIONS = (Direction.LEFT, Direction.RIGHT)
COLUMN_DIRECTIONS = (Direction.UP, Direction.DOWN)


class Viewport(BaseModel):
    """Inclusive rectangle drawn by the renderer: every occupied cell plus a margin."""

    max_row: int
    min_col: int
    min_row: int
    max_col: int

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.max_row, self.min_col, self.min_row, self.max_col)

    def contains(self, row: int, col: int) -> bool:
        return self.min_row <= row <= self.max_row and self.min_col <= col <= self.max_col

    def cells(self) -> Iterable[Cell]:
        for row in range(self.min_row, self.max_row + 1):
            for col in range(self.min_col, self.max_col + 1):
                yield (row, col)


class Board(BaseModel):
    """The shared Qwirkle board and the only mutator of its cells.

    - Square grid of side `size` centered on (size // 2, size // 2)
    - Cells are stored sparsely: a missing key is an empty cell
    - Every placement is staged in an overlay, validated as a whole and merged
      only on success, so a refused placement never changes the board
    - Placement calls return a `PlacementResult` instead of raising
    """

    size: int = Field(default=GRID_SIZE, ge=GRID_SIZE, description="Side of the square grid.")

    tiles_by_pos: dict[Cell, Tile] = Field(
        default_factory=dict,
        description="Mapping from (row, col) to the tile placed there.",
    )

    viewport: Viewport | None = Field(
        default=None,
        description="Rendering bounds; derived from the center when not given.",
    )

    @model_validator(mode="after")
    def _initialize_board(self) -> Board:
        for row, col in self.tiles_by_pos:
            if not self._in_range(row, col):
                msg = f"Cell ({row}, {col}) is outside a {self.size}x{self.size} board"
                raise ValueError(msg)

        if self.viewport is None:
            center = self.center
            self.viewport = Viewport(
                max_row=center + VIEWPORT_MARGIN,
                min_col=center - VIEWPORT_MARGIN,
                min_row=center - VIEWPORT_MARGIN,
                max_col=center + VIEWPORT_MARGIN,
            )
            self._grow_viewport(self.tiles_by_pos)
        return self

    # ------------------------------------------------------------------
    # Query surface
    # ------------------------------------------------------------------

    @property
    def center(self) -> int:
        return self.size // 2

    def is_empty(self) -> bool:
        return not self.tiles_by_pos

    def bounds(self) -> tuple[int, int, int, int]:
        """Return the viewport as (max_row, min_col, min_row, max_col)."""
        return self.viewport.as_tuple()

    def get(self, row: int, col: int) -> Tile | None:
        """Return the tile at (row, col); None for empty and off-grid cells."""
        return self.tiles_by_pos.get((row, col))

    def placed_tiles(self) -> list[TileAtPosition]:
        return [
            TileAtPosition(row=row, col=col, tile=tile) for (row, col), tile in sorted(self.tiles_by_pos.items())
        ]

    def can_place(self, row: int, col: int, tile: Tile) -> bool:
        """Check whether `tile` alone could legally go to (row, col). Never changes the board."""
        cell = (row, col)
        # Every legal cell touches a tile, so it lies inside the viewport margin.
        if not self.viewport.contains(row, col) or cell in self.tiles_by_pos:
            return False
        return self._check_cell(cell, {cell: tile}) is None

    # ------------------------------------------------------------------
    # Placement entry points
    # ------------------------------------------------------------------

    def first_move(self, direction: Direction, tiles: Sequence[Tile]) -> PlacementResult:
        """Open the game with a line of tiles starting at the center cell.

        The tiles must all have one color and distinct shapes; a single tile is
        always accepted.
        """
        if not self.is_empty():
            return self._rejected(RejectionReason.ILLEGAL_STATE, "The first move can only be played on an empty board")
        if not tiles:
            return self._rejected(RejectionReason.INVALID_FIRST_MOVE, "The first move needs at least one tile")

        colors = {tile.color for tile in tiles}
        shapes = {tile.shape for tile in tiles}
        if len(colors) != 1 or len(shapes) != len(tiles):
            return self._rejected(
                RejectionReason.INVALID_FIRST_MOVE,
                "First move tiles must share one color and have distinct shapes",
            )

        center = self.center
        pending, rejection = self._stage(
            (direction.step(center, center, i), tile) for i, tile in enumerate(tiles)
        )
        if rejection is not None:
            return self._rejected_with(rejection)
        return self._commit(pending)

    def place_tile(self, row: int, col: int, tile: Tile) -> PlacementResult:
        return self.place_run(row, col, Direction.RIGHT, [tile])

    def place_run(self, row: int, col: int, direction: Direction, tiles: Sequence[Tile]) -> PlacementResult:
        """Place tiles one per cell from (row, col) along `direction`."""
        if self.is_empty():
            return self._rejected(RejectionReason.ILLEGAL_STATE, "The first move must be played with first_move")
        if not tiles:
            return self._rejected(RejectionReason.RULE_VIOLATION, "No tiles to place")

        pending, rejection = self._stage((direction.step(row, col, i), tile) for i, tile in enumerate(tiles))
        if rejection is None:
            rejection = self._check_cells(pending)
        if rejection is None:
            rejection = self._check_attached(pending)
        if rejection is not None:
            return self._rejected_with(rejection)
        return self._commit(pending)

    def place_set(self, placements: Sequence[TileAtPosition]) -> PlacementResult:
        """Place freely positioned tiles that must end up on one straight line."""
        if self.is_empty():
            return self._rejected(RejectionReason.ILLEGAL_STATE, "The first move must be played with first_move")
        if not placements:
            return self._rejected(RejectionReason.RULE_VIOLATION, "No tiles to place")

        pending, rejection = self._stage((placement.cell, placement.tile) for placement in placements)
        if rejection is None:
            rejection = self._check_cells(pending)
        if rejection is None and not self._is_colinear([placement.cell for placement in placements], pending):
            rejection = Rejection(
                reason=RejectionReason.NOT_COLINEAR,
                message="All tiles of a move must be placed on one straight line",
            )
        if rejection is None:
            rejection = self._check_attached(pending)
        if rejection is not None:
            return self._rejected_with(rejection)
        return self._commit(pending)

    def place(self, request: PlacementRequest) -> PlacementResult:
        """Dispatch any placement request to the matching entry point."""
        if isinstance(request, TilePlacement):
            return self.place_tile(request.row, request.col, request.tile)
        if isinstance(request, RunPlacement):
            return self.place_run(request.row, request.col, request.direction, request.tiles)
        if isinstance(request, SetPlacement):
            return self.place_set(request.placements)

        msg = f"Unknown placement request: {request!r}"
        raise TypeError(msg)

    # ------------------------------------------------------------------
    # Staging and commit
    # ------------------------------------------------------------------

    def _in_range(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _stage(self, placements: Iterable[tuple[Cell, Tile]]) -> tuple[dict[Cell, Tile], Rejection | None]:
        """Write tiles into a fresh overlay, stopping at the first unusable cell.

        The overlay keeps insertion order, which is the order the caller gave.
        """
        pending: dict[Cell, Tile] = {}
        for cell, tile in placements:
            row, col = cell
            if not self._in_range(row, col):
                return pending, Rejection(
                    reason=RejectionReason.OUT_OF_BOUNDS,
                    message=f"The position ({row}, {col}) is outside the board",
                    cell=cell,
                )
            if cell in pending or cell in self.tiles_by_pos:
                return pending, Rejection(
                    reason=RejectionReason.CELL_OCCUPIED,
                    message=f"The position ({row}, {col}) already contains a tile",
                    cell=cell,
                )
            pending[cell] = tile
        return pending, None

    def _commit(self, pending: dict[Cell, Tile]) -> PlacementResult:
        points = self._score(pending)
        self.tiles_by_pos.update(pending)
        self._grow_viewport(pending)
        logger.info("Placed %d tile(s) at %s for %d point(s)", len(pending), list(pending), points)
        return PlacementResult.accepted(points)

    def _rejected(self, reason: RejectionReason, message: str, cell: Cell | None = None) -> PlacementResult:
        logger.debug("Placement rejected (%s): %s", reason.value, message)
        return PlacementResult.rejected(reason, message, cell)

    def _rejected_with(self, rejection: Rejection) -> PlacementResult:
        logger.debug("Placement rejected (%s): %s", rejection.reason.value, rejection.message)
        return PlacementResult(rejection=rejection)

    def _grow_viewport(self, cells: Iterable[Cell]) -> None:
        viewport = self.viewport
        last = self.size - 1
        for row, col in cells:
            viewport.max_row = min(last, max(viewport.max_row, row + VIEWPORT_MARGIN))
            viewport.min_row = max(0, min(viewport.min_row, row - VIEWPORT_MARGIN))
            viewport.max_col = min(last, max(viewport.max_col, col + VIEWPORT_MARGIN))
            viewport.min_col = max(0, min(viewport.min_col, col - VIEWPORT_MARGIN))

    # ------------------------------------------------------------------
    # Lines and rules
    # ------------------------------------------------------------------

    def _tile_at(self, cell: Cell, pending: dict[Cell, Tile]) -> Tile | None:
        tile = pending.get(cell)
        if tile is None:
            tile = self.tiles_by_pos.get(cell)
        return tile

    def _ray(self, cell: Cell, direction: Direction, pending: dict[Cell, Tile]) -> list[Cell]:
        """Occupied cells met walking from `cell` (excluded) until the first empty cell."""
        cells = []
        row, col = direction.step(*cell)
        while self._tile_at((row, col), pending) is not None:
            cells.append((row, col))
            row, col = direction.step(row, col)
        return cells

    def _line(self, cell: Cell, directions: tuple[Direction, Direction], pending: dict[Cell, Tile]) -> list[Cell]:
        """The maximal line through `cell` along one axis, ordered from the first direction to the second."""
        backward, forward = directions
        return [*reversed(self._ray(cell, backward, pending)), cell, *self._ray(cell, forward, pending)]

    def _lines(self, cell: Cell, pending: dict[Cell, Tile]) -> tuple[list[Cell], list[Cell]]:
        return self._line(cell, ROW_DIRECTIONS, pending), self._line(cell, COLUMN_DIRECTIONS, pending)

    def _line_error(self, line: list[Cell], pending: dict[Cell, Tile]) -> str | None:
        tiles = [self._tile_at(cell, pending) for cell in line]
        if len(set(tiles)) != len(tiles):
            return "A line cannot contain the same tile twice"
        if len(tiles) == 1:
            return None

        same_color = len({tile.color for tile in tiles}) == 1
        same_shape = len({tile.shape for tile in tiles}) == 1
        if same_color == same_shape:
            return "The tiles of a line must share either their color or their shape"
        return None

    def _check_cell(self, cell: Cell, pending: dict[Cell, Tile]) -> Rejection | None:
        row_line, column_line = self._lines(cell, pending)
        for line in (row_line, column_line):
            error = self._line_error(line, pending)
            if error is not None:
                return Rejection(reason=RejectionReason.RULE_VIOLATION, message=error, cell=cell)

        if len(row_line) == 1 and len(column_line) == 1:
            return Rejection(
                reason=RejectionReason.RULE_VIOLATION,
                message=f"The tile at ({cell[0]}, {cell[1]}) must touch another tile",
                cell=cell,
            )
        return None

    def _check_cells(self, pending: dict[Cell, Tile]) -> Rejection | None:
        for cell in pending:
            rejection = self._check_cell(cell, pending)
            if rejection is not None:
                return rejection
        return None

    def _check_attached(self, pending: dict[Cell, Tile]) -> Rejection | None:
        """At least one neighbour outside the move must already hold a tile."""
        for row, col in pending:
            for direction in Direction:
                neighbour = direction.step(row, col)
                if neighbour not in pending and neighbour in self.tiles_by_pos:
                    return None
        return Rejection(
            reason=RejectionReason.NOT_ATTACHED,
            message="The tiles must be attached to a tile already on the board",
        )

    def _is_colinear(self, cells: list[Cell], pending: dict[Cell, Tile]) -> bool:
        """Check that every cell lies on the occupied ray defined by the first two cells."""
        if len(cells) == 1:
            return True

        (first_row, first_col), (second_row, second_col) = cells[0], cells[1]
        if first_row == second_row:
            direction = Direction.LEFT if first_col > second_col else Direction.RIGHT
        elif first_col == second_col:
            direction = Direction.UP if first_row > second_row else Direction.DOWN
        else:
            return False

        ray = {cells[0], *self._ray(cells[0], direction, pending)}
        return all(cell in ray for cell in cells)

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def _has_neighbour(self, cell: Cell, directions: tuple[Direction, Direction], pending: dict[Cell, Tile]) -> bool:
        return any(self._tile_at(direction.step(*cell), pending) is not None for direction in directions)

    def _score(self, pending: dict[Cell, Tile]) -> int:
        """Score the staged move against the board it would produce.

        Each cell of every line through a new tile counts once, each completed
        line adds its bonus once, and each new tile joining a row and a column
        adds one point.
        """
        counted: set[Cell] = set()
        completed: set[tuple[Cell, ...]] = set()
        bridges = 0
        for cell in pending:
            for line in self._lines(cell, pending):
                counted.update(line)
                if len(line) == COMPLETED_LINE_LENGTH:
                    completed.add(tuple(line))
            if self._has_neighbour(cell, ROW_DIRECTIONS, pending) and self._has_neighbour(
                cell, COLUMN_DIRECTIONS, pending
            ):
                bridges += 1
        return len(counted) + COMPLETED_LINE_BONUS * len(completed) + bridges

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def pretty_print(self) -> str:
        """Render the viewport with row and column labels.

        Each tile shows as its color letter followed by its shape glyph; empty
        cells show as dots.
        """
        viewport = self.viewport
        lines = []

        header = ["    "]
        for col in range(viewport.min_col, viewport.max_col + 1):
            header.append(f"{col:>3}")
        lines.append("".join(header))

        for row in range(viewport.min_row, viewport.max_row + 1):
            line_parts = [f"{row:>3} "]
            for col in range(viewport.min_col, viewport.max_col + 1):
                tile = self.get(row, col)
                line_parts.append(f" {tile}" if tile is not None else " ..")
            lines.append("".join(line_parts))

        return "\n".join(lines)
