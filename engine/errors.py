"""
Exception hierarchy for the tic-tac-toe engine.

Two families of failure exist, and both are the caller's fault:

    BoardParseError       — the board text could not be turned into a Board.
    IllegalPositionError  — a Board was built but the engine cannot move on it.

Both derive from ValueError so generic callers can treat them as bad input.
The web layer maps each family to a 400 response.
"""


class TicTacToeError(Exception):
    """Base class for every error raised by the engine."""


# ---------------------------------------------------------------------------
# Parse errors
# ---------------------------------------------------------------------------


class BoardParseError(TicTacToeError, ValueError):
    """The board text is not a valid position."""


class WrongLengthError(BoardParseError):
    """The board does not have exactly nine cells."""

    def __init__(self, length: int) -> None:
        super().__init__(f"expected 9 cells, got {length}")
        self.length = length


class InvalidCharError(BoardParseError):
    """A cell character is not one of 'x', 'o', '+' or ' '."""

    def __init__(self, char: str, index: int | None = None) -> None:
        where = "" if index is None else f" at index {index}"
        super().__init__(f"invalid cell character {char!r}{where}")
        self.char = char
        self.index = index


class InconsistentCountsError(BoardParseError):
    """Marker counts do not describe a position where O is to move."""

    def __init__(self, x_count: int, o_count: int, empty_count: int) -> None:
        super().__init__(
            f"inconsistent marker counts: x={x_count} o={o_count} empty={empty_count}"
        )
        self.x_count = x_count
        self.o_count = o_count
        self.empty_count = empty_count


# ---------------------------------------------------------------------------
# Precondition errors
# ---------------------------------------------------------------------------


class IllegalPositionError(TicTacToeError, ValueError):
    """The engine was asked to move on a position where it cannot."""


class BoardFullError(IllegalPositionError):
    """No empty cell is left to play."""

    def __init__(self) -> None:
        super().__init__("Board is full")


class NotOTurnError(IllegalPositionError):
    """X and O counts differ, so it is X who should move next."""

    def __init__(self) -> None:
        super().__init__("It is not O's turn")
