"""
Search entry point: exhaustive minimax and move selection for O.

The tic-tac-toe game tree is tiny (at most 9! move sequences from the empty
board), so the engine searches it completely on every call. There is no
alpha-beta pruning, no move ordering, and no transposition table; every
position is classified exactly as perfect play would resolve it.

Results are three-valued (GameResult) rather than numeric scores. Each side
prefers its own win, then a draw, then a loss.

play() is the stable interface used by the web layer and the benchmark tool.
"""

import logging

from engine.board import Board, GameResult, Marker, Player
from engine.errors import BoardFullError, NotOTurnError

_log = logging.getLogger(__name__)


# Per-mover win result, used when folding child results.
_WIN_FOR: dict[Player, GameResult] = {
    Player.X: GameResult.X_WINS,
    Player.O: GameResult.O_WINS,
}


def minimax(board: Board, next_to_move: Player) -> GameResult:
    """
    Classify `board` under perfect play with `next_to_move` to move.

    Terminal checks come first, in a fixed order: an X triple is an X win,
    otherwise an O triple is an O win. A full board with no triple is a draw.
    Otherwise every child is classified recursively with the opponent to
    move, and the mover picks their best outcome: a win if any child wins
    for them, else a draw if any child draws, else a loss.

    Args:
        board:        Position to classify. Not modified.
        next_to_move: The player whose turn it is on `board`.

    Returns:
        The game-theoretic value of the position.
    """
    finished = board.winner()
    if finished is not None:
        return finished

    children = board.children(next_to_move)
    if not children:
        return GameResult.DRAW

    opponent = next_to_move.opponent
    results = [minimax(child, opponent) for child in children]

    if _WIN_FOR[next_to_move] in results:
        return _WIN_FOR[next_to_move]
    if GameResult.DRAW in results:
        return GameResult.DRAW
    return _WIN_FOR[opponent]


def evaluate_moves(board: Board) -> list[tuple[Board, GameResult]]:
    """
    Pair each of O's candidate moves with its minimax classification.

    Candidates are in increasing cell index order, and each one is classified
    with X to move next.
    """
    return [(child, minimax(child, Player.X)) for child in board.children(Player.O)]


def _moved_cell(before: Board, after: Board) -> int:
    for index, (old, new) in enumerate(zip(before.markers, after.markers)):
        if old != new:
            return index
    return -1


def play(board: Board) -> Board:
    """
    Return the board after O makes its best move.

    Selection policy, in priority order:
        1. The first move (lowest cell index) that forces an O win.
        2. Otherwise the first move that holds a draw.
        3. Otherwise the first generated move. Every move loses, and no
           attempt is made to prolong the game.

    Args:
        board: A position where O is to move. Not modified.

    Returns:
        A new Board with one more O marker.

    Raises:
        BoardFullError: the board has no empty cell.
        NotOTurnError:  X and O counts differ, so it is X's turn.
    """
    if board.is_full():
        raise BoardFullError()
    if board.count(Marker.O) != board.count(Marker.X):
        raise NotOTurnError()

    candidates = evaluate_moves(board)

    for wanted in (GameResult.O_WINS, GameResult.DRAW):
        for child, result in candidates:
            if result is wanted:
                _log.info(
                    "Board=%r move=%d result=%s",
                    board.render(),
                    _moved_cell(board, child),
                    result.value,
                )
                return child

    child, result = candidates[0]
    _log.info(
        "Board=%r move=%d result=%s (forced loss)",
        board.render(),
        _moved_cell(board, child),
        result.value,
    )
    return child
