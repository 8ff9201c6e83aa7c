import pytest
from conftest import CENTER, tile

from qwirkle.enums import Color, Direction, RejectionReason, Shape
from qwirkle.models import Board, GameSession, Player, TileBag
from qwirkle.models.game_session import FINISHING_BONUS

C = CENTER


def _session(ann_hand, bob_hand, bag_tiles=(), board=None):
    return GameSession(
        players=[Player(name="Ann", hand=list(ann_hand)), Player(name="Bob", hand=list(bob_hand))],
        board=board,
        bag=TileBag(tiles=list(bag_tiles), seed=5),
    )


ANN_HAND = [
    tile(Color.BLUE, Shape.PLUS),
    tile(Color.BLUE, Shape.CROSS),
    tile(Color.RED, Shape.STAR),
]
BOB_HAND = [tile(Color.BLUE, Shape.ROUND), tile(Color.GREEN, Shape.SQUARE)]
SPARE = [tile(Color.YELLOW, Shape.DIAMOND)] * 10


def test_new_session_deals_full_hands():
    session = GameSession.new(["Ann", "Bob", "Cy"], seed=4)

    assert [len(p.hand) for p in session.players] == [6, 6, 6]
    assert session.bag.size() == 108 - 18
    assert session.current_player.name == "Ann"
    assert session.board.is_empty()


def test_same_seed_deals_the_same_hands():
    first = GameSession.new(["Ann", "Bob"], seed=9)
    second = GameSession.new(["Ann", "Bob"], seed=9)

    assert [p.hand for p in first.players] == [p.hand for p in second.players]


def test_session_needs_two_players():
    with pytest.raises(ValueError):
        GameSession(players=[Player(name="Ann")])


def test_accepted_move_scores_refills_and_passes_the_turn():
    session = _session(ANN_HAND, BOB_HAND, SPARE)

    result = session.first(Direction.RIGHT, [0, 1])

    ann = session.players[0]
    assert result.points == 2
    assert ann.score == 2
    assert tile(Color.BLUE, Shape.PLUS) not in ann.hand
    assert len(ann.hand) == 6
    assert session.current_player.name == "Bob"
    assert session.board.get(C, C + 1) == tile(Color.BLUE, Shape.CROSS)


def test_refused_move_changes_nothing():
    session = _session(ANN_HAND, BOB_HAND, SPARE)

    result = session.first(Direction.RIGHT, [0, 2])

    assert result.reason is RejectionReason.INVALID_FIRST_MOVE
    assert session.players[0].hand == ANN_HAND
    assert session.players[0].score == 0
    assert session.current_player.name == "Ann"
    assert session.bag.size() == len(SPARE)


def test_moves_by_hand_position():
    session = _session(ANN_HAND, BOB_HAND, SPARE)
    session.first(Direction.RIGHT, [0, 1]).unwrap()

    assert session.play_tile(C + 1, C, 0).points == 2
    assert session.players[1].score == 2

    # Ann's remaining red star cannot join the blue line.
    assert session.play_run(C, C + 2, Direction.RIGHT, [0]).reason is RejectionReason.RULE_VIOLATION


def test_play_set_uses_hand_positions():
    session = _session(ANN_HAND, [tile(Color.BLUE, Shape.ROUND), tile(Color.BLUE, Shape.STAR)], SPARE)
    session.first(Direction.RIGHT, [0, 1]).unwrap()

    result = session.play_set([(C, C + 2, 1), (C, C - 1, 0)])

    assert result.points == 4
    assert session.board.get(C, C - 1) == tile(Color.BLUE, Shape.ROUND)
    assert session.board.get(C, C + 2) == tile(Color.BLUE, Shape.STAR)


def test_unknown_hand_position_raises():
    session = _session(ANN_HAND, BOB_HAND, SPARE)

    with pytest.raises(IndexError):
        session.play_tile(C, C, 7)


def test_pass_turn_counts_passes():
    session = _session(ANN_HAND, BOB_HAND, SPARE)

    session.pass_turn()

    assert session.current_player.name == "Bob"
    assert session.passes_in_a_row == 1


def test_last_tile_with_an_empty_bag_ends_the_game():
    session = _session([tile(Color.BLUE, Shape.PLUS)], BOB_HAND)

    session.first(Direction.RIGHT, [0]).unwrap()

    assert session.players[0].score == 1 + FINISHING_BONUS
    assert session.is_over()
    assert [p.name for p in session.winners()] == ["Ann"]


def test_game_is_not_over_while_the_bag_has_tiles():
    session = _session(ANN_HAND, BOB_HAND, SPARE)
    session.pass_turn()
    session.pass_turn()

    assert not session.is_over()


def test_game_ends_when_nobody_can_play():
    board = Board()
    board.first_move(Direction.RIGHT, [tile(Color.BLUE, Shape.PLUS)]).unwrap()
    session = _session([tile(Color.RED, Shape.SQUARE)], [tile(Color.GREEN, Shape.ROUND)], board=board)

    assert not session.any_player_can_play()
    assert session.is_over()


def test_game_goes_on_while_someone_can_play():
    board = Board()
    board.first_move(Direction.RIGHT, [tile(Color.BLUE, Shape.PLUS)]).unwrap()
    session = _session([tile(Color.RED, Shape.SQUARE)], [tile(Color.GREEN, Shape.PLUS)], board=board)

    assert session.any_player_can_play()
    assert not session.is_over()


def test_a_round_of_passes_with_an_empty_bag_ends_the_game():
    board = Board()
    board.first_move(Direction.RIGHT, [tile(Color.BLUE, Shape.PLUS)]).unwrap()
    session = _session([tile(Color.BLUE, Shape.ROUND)], [tile(Color.GREEN, Shape.PLUS)], board=board)

    session.pass_turn()
    assert not session.is_over()
    session.pass_turn()
    assert session.is_over()
