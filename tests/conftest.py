"""Shared pytest fixtures for fastapi-static-hello tests."""

from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fastapi_static_hello import ServerConfig, create_app

INDEX_HTML = b"<!doctype html>\n<html><body><h1>Hello</h1></body></html>\n"


@pytest.fixture
def create_static_tree(tmp_path: Path):
    """Create a static root from a dict specification.

    Accepts a dict where:
    - Keys are file or directory names (e.g., "index.html", "css")
    - Values are either:
      - bytes or str: content of the file
      - dict: nested subdirectories

    Example:
        {
            "index.html": "<h1>Hi</h1>",
            "css": {"site.css": "body {}"},
        }

    Returns the created static root directory.
    """

    def _create(spec: dict[str, Any], parent_dir: Path | None = None) -> Path:
        base = parent_dir or tmp_path / "public"
        base.mkdir(parents=True, exist_ok=True)

        for name, value in spec.items():
            if isinstance(value, bytes):
                (base / name).write_bytes(value)
            elif isinstance(value, str):
                (base / name).write_text(value)
            elif isinstance(value, dict):
                _create(value, parent_dir=base / name)
            else:
                msg = f"Invalid spec value type: {type(value)}"
                raise TypeError(msg)

        return base

    return _create


@pytest.fixture
def static_root(create_static_tree) -> Path:
    """A static root with a typical mix of assets."""
    return create_static_tree(
        {
            "index.html": INDEX_HTML,
            "app.js": "console.log('hi');\n",
            "logo.png": b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR",
            ".env": "SECRET=1\n",
            "docs": {
                "index.html": "<h1>Docs</h1>",
                "guide.txt": "read me\n",
            },
            "empty": {},
        }
    )


@pytest.fixture
def config(static_root: Path) -> ServerConfig:
    """Server configuration pointing at the static_root fixture."""
    return ServerConfig(port=0, static_root=static_root)


@pytest.fixture
def app(config: ServerConfig) -> FastAPI:
    """Application built from the config fixture."""
    return create_app(config)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client for the app fixture."""
    return TestClient(app)


@pytest.fixture
def index_html() -> bytes:
    """Contents of index.html in the static_root fixture."""
    return INDEX_HTML
