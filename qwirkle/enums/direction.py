from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """The four orthogonal directions on the board.

    Each value is a ``(delta_row, delta_col)`` unit vector. Rows grow downwards
    and columns grow to the right.
    """

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta_row(self) -> int:
        return self.value[0]

    @property
    def delta_col(self) -> int:
        return self.value[1]

    @property
    def is_vertical(self) -> bool:
        return self.delta_col == 0

    @property
    def nickname(self) -> str:
        """One-letter name used by the command line (u, d, l, r)."""
        return self.name[0].lower()

    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def step(self, row: int, col: int, distance: int = 1) -> tuple[int, int]:
        """Cell reached by walking ``distance`` cells from (row, col)."""
        return row + distance * self.delta_row, col + distance * self.delta_col

    @classmethod
    def from_nickname(cls, nickname: str) -> Direction:
        for direction in cls:
            if direction.nickname == nickname.strip().lower():
                return direction

        msg = f"Unknown direction: {nickname!r} (expected one of u, d, l, r)"
        raise ValueError(msg)


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
