"""Process configuration.

The only setting read from the environment is ``PORT``. Host and static
root are fixed; they live on ``ServerConfig`` so callers (and tests) can
point a config at another directory without touching the environment.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from fastapi_static_hello.exceptions import ConfigurationError

PORT_ENV_VAR = "PORT"
DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_STATIC_ROOT = Path("public")

_MAX_PORT = 65535


@dataclass(frozen=True)
class ServerConfig:
    """Listening configuration, built once at startup.

    Attributes:
        port: TCP port to listen on. 0 asks the OS for any free port.
        host: Bind address. All interfaces by default.
        static_root: Directory whose files are served for unmatched paths.
    """

    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    static_root: Path = field(default=DEFAULT_STATIC_ROOT)

    @property
    def resolved_static_root(self) -> Path:
        """Absolute, symlink-resolved static root."""
        return Path(self.static_root).resolve()


def load_config(environ: Mapping[str, str] | None = None) -> ServerConfig:
    """Build the server configuration from the environment.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        A ServerConfig with the resolved port.

    Raises:
        ConfigurationError: If PORT is set but is not an integer in 0..65535.

    Examples:
        load_config({})                 -> port 3000
        load_config({"PORT": "8080"})   -> port 8080
        load_config({"PORT": ""})       -> port 3000
    """
    env = os.environ if environ is None else environ
    return ServerConfig(port=_parse_port(env.get(PORT_ENV_VAR)))


def _parse_port(raw: str | None) -> int:
    """Parse a PORT value, falling back to the default when unset or empty."""
    if raw is None or not raw.strip():
        return DEFAULT_PORT

    value = raw.strip()
    if not (value.isascii() and value.isdigit()):
        raise ConfigurationError(
            f"{PORT_ENV_VAR} must be an integer between 0 and {_MAX_PORT}, got {raw!r}"
        )

    port = int(value)
    if port > _MAX_PORT:
        raise ConfigurationError(
            f"{PORT_ENV_VAR} must be an integer between 0 and {_MAX_PORT}, got {raw!r}"
        )
    return port
