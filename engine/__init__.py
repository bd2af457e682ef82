"""
Tic-tac-toe engine package.

This package implements a perfect-play tic-tac-toe engine using exhaustive
minimax search. The engine always plays O, and O always moves first.

Modules:
    constants — Board geometry, winning lines, and text symbols
    errors    — Exception hierarchy for parse and precondition failures
    board     — Marker, Player, GameResult, and the immutable Board value
    search    — Minimax classification and move selection (play)
"""
