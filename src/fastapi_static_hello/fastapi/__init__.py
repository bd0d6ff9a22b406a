"""FastAPI adapter for the static hello server."""

from fastapi_static_hello.fastapi.app import create_app

__all__ = ["create_app"]
