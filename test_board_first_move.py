import logging

from conftest import CENTER, board_state, tile

from qwirkle.enums import Color, Direction, RejectionReason, Shape
from qwirkle.models import Board, PlacementResult


def test_new_board_is_empty():
    board = Board()
    assert board.is_empty()
    assert board.size == 91
    assert board.center == CENTER
    assert board.bounds() == (CENTER + 2, CENTER - 2, CENTER - 2, CENTER + 2)
    assert board.get(CENTER, CENTER) is None


def test_first_move_writes_from_the_center(board):
    tiles = [
        tile(Color.BLUE, Shape.PLUS),
        tile(Color.BLUE, Shape.CROSS),
        tile(Color.BLUE, Shape.DIAMOND),
    ]

    result = board.first_move(Direction.RIGHT, tiles)

    assert result.ok
    assert result.points == 3
    assert not board.is_empty()
    assert [board.get(CENTER, CENTER + i) for i in range(3)] == tiles
    assert board.bounds() == (CENTER + 2, CENTER - 2, CENTER - 2, CENTER + 4)


def test_first_move_upwards_grows_the_top_bound(board):
    board.first_move(Direction.UP, [tile(Color.RED, Shape.ROUND), tile(Color.RED, Shape.STAR)]).unwrap()

    assert board.get(CENTER - 1, CENTER) == tile(Color.RED, Shape.STAR)
    assert board.bounds() == (CENTER + 2, CENTER - 2, CENTER - 3, CENTER + 2)


def test_single_tile_first_move_scores_one(board):
    assert board.first_move(Direction.LEFT, [tile(Color.GREEN, Shape.SQUARE)]).points == 1


def test_first_move_on_a_non_empty_board_is_illegal(opened_board):
    result = opened_board.first_move(Direction.DOWN, [tile(Color.BLUE, Shape.SQUARE)])
    assert result.reason is RejectionReason.ILLEGAL_STATE


def test_first_move_needs_a_single_color(board):
    before = board_state(board)
    result = board.first_move(
        Direction.DOWN,
        [tile(Color.RED, Shape.DIAMOND), tile(Color.BLUE, Shape.SQUARE), tile(Color.RED, Shape.STAR)],
    )

    assert result.reason is RejectionReason.INVALID_FIRST_MOVE
    assert board_state(board) == before


def test_first_move_rejects_repeated_shapes(board):
    result = board.first_move(Direction.RIGHT, [tile(Color.BLUE, Shape.PLUS), tile(Color.BLUE, Shape.PLUS)])
    assert result.reason is RejectionReason.INVALID_FIRST_MOVE
    assert board.is_empty()


def test_first_move_rejects_a_shape_line(board):
    result = board.first_move(Direction.RIGHT, [tile(Color.BLUE, Shape.PLUS), tile(Color.RED, Shape.PLUS)])
    assert result.reason is RejectionReason.INVALID_FIRST_MOVE
    assert board.is_empty()


def test_first_move_without_tiles(board):
    assert board.first_move(Direction.RIGHT, []).reason is RejectionReason.INVALID_FIRST_MOVE
    assert board.is_empty()


def test_refused_first_move_is_logged(opened_board, caplog):
    caplog.set_level(logging.DEBUG, logger="qwirkle.models.board")

    result = opened_board.first_move(Direction.RIGHT, [tile(Color.RED, Shape.STAR)])

    assert result == PlacementResult.rejected(
        RejectionReason.ILLEGAL_STATE, "The first move can only be played on an empty board"
    )
    assert "Placement rejected (illegal_state)" in caplog.text
