"""
The tic-tac-toe board: markers, players, results, and the Board value.

A Board is an immutable sequence of nine markers read left-to-right,
top-to-bottom. It is only ever built from validated text (Board.parse) or
derived from another Board (Board.children), and it is never mutated. That
makes Boards safe to hash, share between requests, and use as dict keys.

Marker vs Player:
    A Marker is what sits in a cell (X, O, or EMPTY). A Player is who is
    moving (X or O). Every Player maps to exactly one Marker; the reverse is
    not true because EMPTY has no player.
"""

import enum
import logging
from dataclasses import dataclass

from engine.constants import (
    BOARD_CELLS,
    EMPTY_CHAR,
    EMPTY_INPUT_CHARS,
    O_CHAR,
    WINNING_LINES,
    X_CHAR,
)
from engine.errors import InconsistentCountsError, InvalidCharError, WrongLengthError

_log = logging.getLogger(__name__)


class Marker(enum.Enum):
    """Contents of a single cell. The value is the rendered character."""

    X = X_CHAR
    O = O_CHAR
    EMPTY = EMPTY_CHAR

    @classmethod
    def from_char(cls, char: str) -> "Marker":
        """
        Map one input character to a Marker.

        Accepts 'x', 'o', and either '+' or ' ' for an empty cell.

        Raises:
            InvalidCharError: for any other character.
        """
        if char == X_CHAR:
            return cls.X
        if char == O_CHAR:
            return cls.O
        if char in EMPTY_INPUT_CHARS:
            return cls.EMPTY
        raise InvalidCharError(char)

    @property
    def symbol(self) -> str:
        return self.value


class Player(enum.Enum):
    """The side taking a turn."""

    X = "x"
    O = "o"

    @property
    def marker(self) -> Marker:
        return Marker.X if self is Player.X else Marker.O

    @property
    def opponent(self) -> "Player":
        return Player.O if self is Player.X else Player.X


class GameResult(enum.Enum):
    """Outcome of a position under perfect play from both sides."""

    X_WINS = "x wins"
    O_WINS = "o wins"
    DRAW = "draw"


@dataclass(frozen=True)
class Board:
    """
    Immutable 3x3 tic-tac-toe position.

    Attributes:
        markers: Exactly nine Markers, indexed 0-8 row by row:
                     0 1 2
                     3 4 5
                     6 7 8
    """

    markers: tuple[Marker, ...]

    def __post_init__(self) -> None:
        if len(self.markers) != BOARD_CELLS:
            raise WrongLengthError(len(self.markers))

    # -----------------------------------------------------------------------
    # Construction and rendering
    # -----------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "Board":
        """Return the board with no markers placed."""
        return cls((Marker.EMPTY,) * BOARD_CELLS)

    @classmethod
    def parse(cls, text: str) -> "Board":
        """
        Build a Board from its nine-character text form.

        Characters map 'x' -> X, 'o' -> O, and '+' or ' ' -> EMPTY. The
        resulting board must describe a position where O is to move: the
        number of X and O markers must be equal and at least one cell must be
        empty. The completely empty board is always accepted. Boards that
        already contain a triple are not rejected.

        Args:
            text: Board text, e.g. "o+++x++++".

        Returns:
            The parsed Board.

        Raises:
            WrongLengthError:        text is not exactly nine characters.
            InvalidCharError:        a character is not x, o, + or space.
            InconsistentCountsError: the counts do not fit O's turn.
        """
        if len(text) != BOARD_CELLS:
            _log.debug("Rejected board %r: wrong length %d", text, len(text))
            raise WrongLengthError(len(text))

        markers = []
        for index, char in enumerate(text):
            try:
                markers.append(Marker.from_char(char))
            except InvalidCharError:
                _log.debug("Rejected board %r: bad character %r at %d", text, char, index)
                raise InvalidCharError(char, index) from None

        board = cls(tuple(markers))

        # Tallied fresh on every call; nothing is kept between parses.
        counts = {marker: board.count(marker) for marker in Marker}
        if counts[Marker.EMPTY] == BOARD_CELLS:
            return board
        if counts[Marker.O] != counts[Marker.X] or counts[Marker.EMPTY] == 0:
            _log.debug("Rejected board %r: counts %s", text, counts)
            raise InconsistentCountsError(
                counts[Marker.X], counts[Marker.O], counts[Marker.EMPTY]
            )
        return board

    def render(self) -> str:
        """Return the nine-character text form, using a space for empty cells."""
        return "".join(marker.symbol for marker in self.markers)

    def __str__(self) -> str:
        return self.render()

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------

    def count(self, marker: Marker) -> int:
        return self.markers.count(marker)

    def is_full(self) -> bool:
        return Marker.EMPTY not in self.markers

    def is_o_turn(self) -> bool:
        """True when X and O counts match and a cell is still free."""
        return self.count(Marker.O) == self.count(Marker.X) and not self.is_full()

    def has_triple(self, player: Player) -> bool:
        """
        Return True if `player` holds all three cells of any winning line.

        Checks the three rows, three columns, and two diagonals.
        """
        marker = player.marker
        return any(
            self.markers[a] == marker and self.markers[b] == marker and self.markers[c] == marker
            for a, b, c in WINNING_LINES
        )

    def winner(self) -> GameResult | None:
        """
        Return the result if a triple is already on the board, else None.

        X is checked before O, so a board holding both triples (which parse
        does not exclude) counts as an X win.
        """
        if self.has_triple(Player.X):
            return GameResult.X_WINS
        if self.has_triple(Player.O):
            return GameResult.O_WINS
        return None

    # -----------------------------------------------------------------------
    # Move generation
    # -----------------------------------------------------------------------

    def children(self, player: Player) -> list["Board"]:
        """
        Return every board reachable by `player` placing one marker.

        Children are produced in increasing cell index order. The search
        relies on this order to break ties between equally good moves.
        A full board has no children.
        """
        result = []
        for index, marker in enumerate(self.markers):
            if marker is Marker.EMPTY:
                cells = list(self.markers)
                cells[index] = player.marker
                result.append(Board(tuple(cells)))
        return result
