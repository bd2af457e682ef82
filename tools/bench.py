#!/usr/bin/env python3
"""
Benchmark: time the full minimax search on a fixed set of positions.

The engine searches the whole game tree on every call, so the empty board is
by far the most expensive position. Run before and after touching the search
to check that move choice is unchanged and to compare timings.

Usage: python3 tools/bench.py
"""
import os
import sys
import time

REPO = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO not in sys.path:
    sys.path.insert(0, REPO)

from engine.board import Board, GameResult
from engine.search import evaluate_moves, play

# Fixed forever, so timings stay comparable across versions. The first five
# form one perfect game; the rest are short tactical positions.
POSITIONS = [
    ("Empty",        "+++++++++"),
    ("Reply 1",      "o+++x++++"),
    ("Block diag",   "oox+x++++"),
    ("Block col",    "ooxxx+o++"),
    ("Last cell",    "ooxxx+oox"),
    ("Win column",   "+xxo++o++"),
    ("Win or block", "oo+xx++++"),
    ("Must block",   "xo+ox++++"),
]


def run_position(label: str, text: str) -> dict:
    """Classify every O move on one position, then play it, timing both.

    Args:
        label: Human-readable position name for display.
        text: Board text accepted by Board.parse.

    Returns:
        Dict with keys: label, board, move, result, options, time_ms.
    """
    board = Board.parse(text)

    start = time.perf_counter()
    candidates = evaluate_moves(board)
    next_board = play(board)
    time_ms = (time.perf_counter() - start) * 1000

    result = next(r for child, r in candidates if child == next_board)
    wins = sum(1 for _, r in candidates if r is GameResult.O_WINS)
    draws = sum(1 for _, r in candidates if r is GameResult.DRAW)

    return {
        "label": label,
        "board": board.render(),
        "move": next_board.render(),
        "result": result.value,
        "options": f"{wins}W/{draws}D/{len(candidates) - wins - draws}L",
        "time_ms": time_ms,
    }


def main() -> None:
    """Run all benchmark positions and print a summary table."""
    print(f"Tic-tac-toe engine benchmark — {sys.executable}")
    print()
    print(
        f"{'Position':<14} {'Board':<11} {'Move':<11} {'Result':<8} "
        f"{'Options':<9} {'Time(ms)':>9}"
    )
    print("-" * 67)

    total_ms = 0.0
    for label, text in POSITIONS:
        r = run_position(label, text)
        total_ms += r["time_ms"]
        print(
            f"{r['label']:<14} {'[' + r['board'] + ']':<11} {'[' + r['move'] + ']':<11} "
            f"{r['result']:<8} {r['options']:<9} {r['time_ms']:>9,.1f}"
        )

    print("-" * 67)
    print(f"{'TOTAL':<14} {'':<11} {'':<11} {'':<8} {'':<9} {total_ms:>9,.1f}")


if __name__ == "__main__":
    main()
