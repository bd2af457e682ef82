"""Tests for minimax classification and O's move selection."""

import pytest

from engine.board import Board, GameResult, Marker, Player
from engine.errors import BoardFullError, IllegalPositionError, NotOTurnError
from engine.search import evaluate_moves, minimax, play


def _board(text: str) -> Board:
    return Board(tuple(Marker.from_char(c) for c in text))


def test_empty_board_is_a_draw():
    assert minimax(Board.empty(), Player.O) is GameResult.DRAW


def test_optimal_first_move():
    assert play(Board.parse("+++++++++")).render() == "o        "


def test_takes_immediate_win():
    next_board = play(Board.parse("+xxo++o++"))
    assert next_board.render() == "oxxo  o  "
    assert next_board.has_triple(Player.O)


# There are several perfect games. This pins the one the index-order
# tie-break produces.
@pytest.mark.parametrize(
    "before, after",
    [
        ("+++++++++", "o        "),
        ("o+++x++++", "oo  x    "),
        ("oox+x++++", "oox x o  "),
        ("ooxxx+o++", "ooxxxoo  "),
        ("ooxxx+oox", "ooxxxooox"),
    ],
)
def test_perfect_game(before, after):
    assert play(Board.parse(before)).render() == after


def test_first_winning_move_not_fastest():
    # Cell 2 wins by a fork, cell 5 wins at once; the lower index is chosen.
    board = Board.parse("xx+oo++++")
    results = dict((c.render(), r) for c, r in evaluate_moves(board))
    assert results["xxooo    "] is GameResult.O_WINS
    assert results["xx ooo   "] is GameResult.O_WINS
    assert play(board).render() == "xxooo    "


def test_forced_loss_plays_first_move():
    # X threatens 2, 7 and 8; nothing O does can stop it.
    board = Board.parse("xx+oxoo++")
    assert minimax(board, Player.O) is GameResult.X_WINS
    assert all(r is GameResult.X_WINS for _, r in evaluate_moves(board))
    assert play(board).render() == "xxooxoo  "


def test_blocks_a_threat():
    assert play(Board.parse("xo+ox++++")).render() == "xo ox   o"


def test_evaluate_moves_order_and_length():
    board = Board.parse("oox+x++++")
    candidates = evaluate_moves(board)
    assert [c for c, _ in candidates] == board.children(Player.O)
    assert len(candidates) == 5


def test_x_triple_checked_before_o_triple():
    board = _board("xxxooo+++")
    assert minimax(board, Player.O) is GameResult.X_WINS
    assert minimax(board, Player.X) is GameResult.X_WINS


def test_full_board_without_triple_is_a_draw():
    board = _board("xoxoxxoxo")
    assert minimax(board, Player.O) is GameResult.DRAW
    assert minimax(board, Player.X) is GameResult.DRAW


def test_x_to_move_fold():
    # X to move on an X-threat board wins; O cannot intervene.
    assert minimax(_board("xx+oo++++"), Player.X) is GameResult.X_WINS


def test_play_full_board_raises():
    with pytest.raises(BoardFullError):
        play(_board("xoxoxxoxo"))


def test_play_out_of_turn_raises():
    with pytest.raises(NotOTurnError):
        play(_board("x++++++++"))
    with pytest.raises(IllegalPositionError):
        play(_board("o++++++++"))


def test_play_does_not_modify_input():
    board = Board.parse("o+++x++++")
    play(board)
    assert board.render() == "o   x    "
