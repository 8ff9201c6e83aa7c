from __future__ import annotations

from enum import Enum


class RejectionReason(str, Enum):
    """Why the board refused a placement. The board is unchanged in every case."""

    ILLEGAL_STATE = "illegal_state"
    """A regular placement on an empty board, or a first move on a non-empty one."""

    CELL_OCCUPIED = "cell_occupied"
    """A target cell already holds a tile."""

    OUT_OF_BOUNDS = "out_of_bounds"
    """A target cell lies outside the grid."""

    RULE_VIOLATION = "rule_violation"
    """Duplicate tile in a line, a line sharing both or neither attribute, or an isolated tile."""

    NOT_ATTACHED = "not_attached"
    """The placed tiles do not touch any tile already on the board."""

    NOT_COLINEAR = "not_colinear"
    """A free placement set whose cells are not on one straight line."""

    INVALID_FIRST_MOVE = "invalid_first_move"
    """First-move tiles that are not one color with distinct shapes."""
