"""
FastAPI web application for the tic-tac-toe engine.

Exposes a single endpoint (GET /) that accepts a board in the `board` query
parameter, runs the engine for O, and returns the resulting board as plain
text followed by a newline.

Architecture notes:
- Sync endpoint (not async): FastAPI runs sync handlers in a thread pool,
  which suits a CPU-bound call like a full minimax search.
- Stateless per request: the client sends the whole board each time; no
  server-side game state is kept between requests.
- Engine errors are mapped to plain-text 400 responses by exception
  handlers, so the route itself only describes the happy path.
"""

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse

from engine.board import Board
from engine.errors import BoardParseError, IllegalPositionError
from engine.search import play

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=logging.INFO)
_log = logging.getLogger(__name__)

PARSE_ERROR_BODY = "Board could not be parsed\n"

app = FastAPI(title="Tic-tac-toe AI", version="1.0.0")


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------


@app.exception_handler(BoardParseError)
async def handle_parse_error(request: Request, exc: BoardParseError) -> PlainTextResponse:
    _log.info("Unparseable board %r: %s", request.query_params.get("board"), exc)
    return PlainTextResponse(PARSE_ERROR_BODY, status_code=400)


@app.exception_handler(IllegalPositionError)
async def handle_illegal_position(request: Request, exc: IllegalPositionError) -> PlainTextResponse:
    """Precondition failures from play(): not O's turn, or nothing left to play."""
    _log.info("Refused board %r: %s", request.query_params.get("board"), exc)
    return PlainTextResponse(f"{exc}\n", status_code=400)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.get("/", response_class=PlainTextResponse)
def root(board: str | None = None) -> str:
    """
    Play O's move on the given board.

    Args:
        board: Nine characters using 'x', 'o', and '+' or ' ' for empty
               cells. A '+' in a raw query string already decodes to a space.

    Returns:
        The board after O's move, with a trailing newline.

    Raises:
        BoardParseError:      missing or malformed board (400).
        IllegalPositionError: not O's turn or no free cell (400).
        HTTPException 500:    the engine failed unexpectedly.
    """
    if board is None:
        raise BoardParseError("missing board parameter")

    position = Board.parse(board)

    try:
        next_position = play(position)
    except IllegalPositionError:
        raise
    except Exception as exc:
        _log.exception("Engine failed for board=%r", board)
        raise HTTPException(status_code=500, detail=f"Engine error: {exc}") from exc

    return f"{next_position.render()}\n"
