import pytest

from qwirkle.enums import Color, Direction, Shape
from qwirkle.models import Board, Tile

CENTER = 45


def tile(color: Color, shape: Shape) -> Tile:
    return Tile(color=color, shape=shape)


def board_state(board: Board):
    """Everything a refused placement must leave untouched."""
    return dict(board.tiles_by_pos), board.bounds(), board.is_empty()


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def opened_board(board):
    """Blue plus, cross and diamond from the center towards the right."""
    board.first_move(
        Direction.RIGHT,
        [
            tile(Color.BLUE, Shape.PLUS),
            tile(Color.BLUE, Shape.CROSS),
            tile(Color.BLUE, Shape.DIAMOND),
        ],
    ).unwrap()
    return board
