"""
Process entry point: serve the web app with uvicorn.

Usage:
    tictactoe-server
    PORT=5000 python -m web.server
"""

import logging

import uvicorn

from web.config import ServerSettings

_log = logging.getLogger(__name__)


def main() -> None:
    """Read settings from the environment and run the server until stopped."""
    logging.basicConfig(level=logging.INFO)
    settings = ServerSettings.from_env()
    _log.info("Starting tic-tac-toe server on %s:%d", settings.host, settings.port)
    uvicorn.run("web.app:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
