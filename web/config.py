"""
Server settings: bind address and port.

The hosting platform passes the port through the PORT environment variable.
A missing or garbled value must never stop the server from starting, so any
value that is not a usable port falls back to the default.
"""

import logging
import os

from pydantic import BaseModel, field_validator

_log = logging.getLogger(__name__)

PORT_ENV_VAR: str = "PORT"
DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 8080


class ServerSettings(BaseModel):
    """
    Where the HTTP server listens.

    Fields:
        host: Bind address. All interfaces by default.
        port: TCP port. Falls back to 8080 when unset or unparseable.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @field_validator("port", mode="before")
    @classmethod
    def fallback_port(cls, v: object) -> int:
        """Replace anything that is not a valid TCP port with the default."""
        if v is None:
            return DEFAULT_PORT
        try:
            port = int(str(v).strip())
        except ValueError:
            _log.warning("Ignoring unparseable port %r, using %d", v, DEFAULT_PORT)
            return DEFAULT_PORT
        if not 0 < port < 65536:
            _log.warning("Ignoring out-of-range port %d, using %d", port, DEFAULT_PORT)
            return DEFAULT_PORT
        return port

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "ServerSettings":
        """Build settings from the process environment (or the given mapping)."""
        env = os.environ if environ is None else environ
        return cls(port=env.get(PORT_ENV_VAR))
