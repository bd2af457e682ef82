"""
Engine constants: board geometry, winning lines, and text symbols.

All fixed numbers and lookup tables used by the engine are defined here so
the board and search modules never introduce magic numbers of their own.

Cells are indexed left-to-right, top-to-bottom:

    0 1 2
    3 4 5
    6 7 8
"""

# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

BOARD_SIDE: int = 3
BOARD_CELLS: int = BOARD_SIDE * BOARD_SIDE

# ---------------------------------------------------------------------------
# Winning lines
# ---------------------------------------------------------------------------
# Every line a player can complete to win. Eight in total: three rows,
# three columns, and the two diagonals.

ROWS: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
)

COLUMNS: tuple[tuple[int, int, int], ...] = (
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
)

DIAGONALS: tuple[tuple[int, int, int], ...] = (
    (0, 4, 8),
    (2, 4, 6),
)

WINNING_LINES: tuple[tuple[int, int, int], ...] = ROWS + COLUMNS + DIAGONALS

# ---------------------------------------------------------------------------
# Text symbols
# ---------------------------------------------------------------------------
# '+' is accepted on input as an empty cell because a literal '+' in a query
# string decodes to a space anyway. Output always uses the space.

X_CHAR: str = "x"
O_CHAR: str = "o"
EMPTY_CHAR: str = " "
EMPTY_INPUT_CHARS: frozenset[str] = frozenset({"+", " "})
