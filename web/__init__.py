"""
Web application package for the tic-tac-toe engine.

Provides a FastAPI app with a single GET endpoint that takes a board and
returns it after the engine's move, plus the uvicorn entry point that serves
it on the port given by the PORT environment variable.
"""
