"""Command-line entry point.

There are no flags: the port comes from the PORT environment variable.

Run with:
    PORT=8080 fastapi-static-hello
    python -m fastapi_static_hello
"""

import logging
import sys
from collections.abc import Sequence

from fastapi_static_hello.config import load_config
from fastapi_static_hello.exceptions import StaticHelloError
from fastapi_static_hello.server import serve

logger = logging.getLogger(__name__)

# Name of the stdout handler configure_logging installs on the package logger
LOG_HANDLER_NAME = "fastapi_static_hello.stdout"


def configure_logging() -> None:
    """Send plain-message INFO logs from this package to stdout.

    Replaces the handler installed by an earlier call, so repeated calls
    never duplicate lines.
    """
    package_logger = logging.getLogger("fastapi_static_hello")
    for handler in list(package_logger.handlers):
        if handler.get_name() == LOG_HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.INFO)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the server and return a process exit status.

    Args:
        argv: Ignored; accepted so the console script and tests share a signature.

    Returns:
        0 on clean shutdown, 1 if configuration or startup failed.
    """
    configure_logging()

    try:
        config = load_config()
        serve(config)
    except StaticHelloError as exc:
        logger.error(f"Failed to start server: {exc}", extra={"error_type": type(exc).__name__})
        return 1
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
