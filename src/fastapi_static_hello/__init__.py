"""Minimal FastAPI server: static files, a greeting and a health check."""

# Primary API
from fastapi_static_hello.config import ServerConfig, load_config

# Route table and static resolution, for advanced users and tests
from fastapi_static_hello.core.routes import ROUTE_TABLE, RouteEntry
from fastapi_static_hello.core.static import resolve_static_file

# Exceptions
from fastapi_static_hello.exceptions import (
    ConfigurationError,
    DuplicateRouteError,
    RouteTableError,
    ServerStartupError,
    StaticHelloError,
    StaticPathError,
)
from fastapi_static_hello.fastapi.app import create_app
from fastapi_static_hello.server import serve

__all__ = [
    # Primary API
    "create_app",
    "load_config",
    "serve",
    "ServerConfig",
    # Core types
    "ROUTE_TABLE",
    "RouteEntry",
    "resolve_static_file",
    # Exceptions
    "ConfigurationError",
    "DuplicateRouteError",
    "RouteTableError",
    "ServerStartupError",
    "StaticHelloError",
    "StaticPathError",
]

__version__ = "1.0.0"
