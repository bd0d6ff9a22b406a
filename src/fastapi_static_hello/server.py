"""Process startup: bind the listener and run uvicorn on it.

The socket is bound here rather than inside uvicorn so a bind failure
surfaces as ServerStartupError instead of uvicorn's own exit path.
"""

import logging
import socket

import uvicorn

from fastapi_static_hello.config import ServerConfig
from fastapi_static_hello.exceptions import ServerStartupError
from fastapi_static_hello.fastapi.app import create_app

logger = logging.getLogger(__name__)

BACKLOG = 2048


def bind_socket(config: ServerConfig) -> socket.socket:
    """Bind and listen on the configured host and port.

    Args:
        config: Server configuration.

    Returns:
        A listening TCP socket.

    Raises:
        ServerStartupError: If the address is in use or otherwise unbindable.
    """
    try:
        sock = socket.create_server((config.host, config.port), backlog=BACKLOG)
    except OSError as exc:
        raise ServerStartupError(
            f"Cannot listen on {config.host}:{config.port}: {exc}"
        ) from exc

    sock.set_inheritable(True)
    return sock


class ListeningServer(uvicorn.Server):
    """uvicorn Server that logs one line once startup has completed.

    Startup includes the application lifespan, so a failing lifespan
    never follows a "running" line.
    """

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if not self.started:
            return

        port = sockets[0].getsockname()[1] if sockets else self.config.port
        logger.info(
            f"Server is running on port {port}",
            extra={"host": self.config.host, "port": port},
        )


def serve(config: ServerConfig) -> None:
    """Run the server until it is shut down.

    The startup line comes from ListeningServer once uvicorn has started.

    Args:
        config: Server configuration.

    Raises:
        ServerStartupError: If the listener cannot be bound.
    """
    app = create_app(config)
    sock = bind_socket(config)

    try:
        port = sock.getsockname()[1]
        server = ListeningServer(
            uvicorn.Config(app, host=config.host, port=port, log_level="info")
        )
        server.run(sockets=[sock])
    finally:
        sock.close()
